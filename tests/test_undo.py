import pytest

from studentqueue.errors import CommandStateError, NothingToUndoError
from studentqueue.priority_queue import StudentPriorityQueue
from studentqueue.undo import AddStudentCommand, CommandState, RemoveTopCommand, UndoManager


@pytest.fixture
def ivy(make_student):
    return make_student(128, 3.7, "R1234567", name="Ivy Huynh")


@pytest.fixture
def alex(make_student):
    return make_student(96, 3.2, "R2000001", name="Alex Kim")


@pytest.fixture
def queue(ivy, alex):
    queue = StudentPriorityQueue()
    queue.insert(ivy)
    queue.insert(alex)
    return queue


def test_undo_add(queue, make_student) -> None:
    manager = UndoManager()
    newcomer = make_student(10, 1.0, "R3")
    size = queue.size()

    manager.execute(AddStudentCommand(queue, newcomer))
    assert queue.size() == size + 1
    assert manager.history_size() == 1

    manager.undo()
    assert queue.size() == size
    assert queue.remove(newcomer) is False
    assert not manager.can_undo()


def test_undo_remove_top(queue, ivy) -> None:
    manager = UndoManager()
    command = RemoveTopCommand(queue)

    manager.execute(command)
    assert command.removed == ivy
    assert queue.peek() != ivy

    manager.undo()
    assert queue.peek() == ivy
    assert queue.size() == 2


def test_undo_remove_top_on_empty_queue() -> None:
    queue = StudentPriorityQueue()
    manager = UndoManager()
    command = RemoveTopCommand(queue)

    manager.execute(command)
    assert command.removed is None
    assert command.name == "Remove Top: None"

    manager.undo()
    assert queue.is_empty()


def test_undo_is_last_in_first_out(queue, ivy, alex, make_student) -> None:
    manager = UndoManager()
    newcomer = make_student(150, 4.0, "R9", name="Top")

    manager.execute(AddStudentCommand(queue, newcomer))
    manager.execute(RemoveTopCommand(queue))
    manager.execute(RemoveTopCommand(queue))
    assert queue.to_array() == (alex,)
    assert len(manager) == 3

    assert manager.undo().name == "Remove Top: Ivy Huynh (R1234567)"
    assert queue.peek() == ivy
    assert manager.undo().name == "Remove Top: Top (R9)"
    assert queue.peek() == newcomer
    assert manager.undo().name == "Add Student: Top (R9)"
    assert queue.peek() == ivy
    assert queue.size() == 2


def test_undo_with_empty_history() -> None:
    manager = UndoManager()

    assert not manager.can_undo()
    with pytest.raises(NothingToUndoError, match="Nothing to undo"):
        manager.undo()


def test_execute_none() -> None:
    with pytest.raises(TypeError):
        UndoManager().execute(None)


def test_command_states(queue, make_student) -> None:
    command = AddStudentCommand(queue, make_student(10, 1.0, "R3"))
    assert command.state is CommandState.CREATED

    with pytest.raises(CommandStateError):
        command.undo()

    command.execute()
    assert command.state is CommandState.EXECUTED
    with pytest.raises(CommandStateError):
        command.execute()

    command.undo()
    assert command.state is CommandState.UNDONE
    with pytest.raises(CommandStateError):
        command.undo()


def test_command_names(queue, ivy) -> None:
    add = AddStudentCommand(queue, ivy)

    assert add.name == "Add Student: Ivy Huynh (R1234567)"
    assert str(add) == add.name
    assert add.student == ivy
