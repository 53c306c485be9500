import pytest

from common.patterns import Command, Observer, Strategy


@pytest.mark.parametrize("base", [Observer, Strategy, Command])
def test_abstract_bases_cannot_be_instantiated(base):
    with pytest.raises(TypeError):
        base()

def test_observer_subclass_must_implement_update():
    class Incomplete(Observer):
        pass

    with pytest.raises(TypeError):
        Incomplete()

def test_minimal_subclasses_are_usable():
    calls = []

    class RecordingObserver(Observer):
        def update(self):
            calls.append("update")

    class DoubleStrategy(Strategy):
        def execute(self):
            return 2 * 21

    class RecordingCommand(Command):
        def execute(self):
            calls.append("execute")

    RecordingObserver().update()
    RecordingCommand().execute()

    assert DoubleStrategy().execute() == 42
    assert calls == ["update", "execute"]
