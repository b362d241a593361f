"""run_demo function."""

from studentqueue.models import Roster, Student
from studentqueue.priority_queue import StudentPriorityQueue
from studentqueue.strategies import GPAFirstStrategy
from studentqueue.undo import AddStudentCommand, RemoveTopCommand, UndoManager
from studentqueue.utils import (
    _generic_load_yaml,
    format_details,
    format_priority_order,
    format_with_score,
    get_example_roster,
)


def _ivy() -> Student:
    return Student("Ivy Huynh", "R1234567", "ivy.huynh@university.edu", 3.7, 128)


def _alex() -> Student:
    return Student("Alex Kim", "R2000001", "alex.kim@university.edu", 3.2, 96)


def _max_both() -> Student:
    return Student("MaxBoth", "R103", "max.both@university.edu", 4.0, 150)


def _max_gpa() -> Student:
    return Student("MaxGPA", "R101", "max.gpa@university.edu", 4.0, 0)


def run_demo() -> None:
    """Walk through strategies, iteration, undo and destructive popping, printing each step."""
    print("=== Student Priority Queue Demo ===\n")

    print("1. DEFAULT STRATEGY (70% units, 30% GPA)")
    roster = _generic_load_yaml(get_example_roster(), Roster)
    pq = roster.build_queue()
    print("Top (peek), should be 'MaxBoth':")
    print(pq.peek())
    print("\nPriority order using the iterator (non-destructive):")
    print(format_priority_order(pq))

    print("\n2. COLLECTION INTEGRATION")
    print(f"Queue size: {pq.size()}")
    print(f"Queue as string: {pq}")
    print(f"Queue to array length: {len(pq.to_array())}")

    print("\n3. COMMAND PATTERN - UNDO")
    undo_queue = StudentPriorityQueue()
    manager = UndoManager()
    manager.execute(AddStudentCommand(undo_queue, _ivy()))
    manager.execute(AddStudentCommand(undo_queue, _alex()))
    print("After adding 2 students:")
    print(format_priority_order(undo_queue))
    manager.execute(RemoveTopCommand(undo_queue))
    print("After removing top student:")
    print(format_priority_order(undo_queue))
    undone = manager.undo()
    print(f"After undoing '{undone.name}':")
    print(format_priority_order(undo_queue))

    print("\n4. STRATEGY PATTERN - GPA FIRST")
    gpa_queue = StudentPriorityQueue(GPAFirstStrategy())
    for student in (_ivy(), _alex(), _max_both(), _max_gpa()):
        gpa_queue.insert(student)
    print(format_priority_order(gpa_queue))
    print(f"Top with GPA-first: {gpa_queue.peek()}")

    print("\n5. DESTRUCTIVE POPPING")
    pop_queue = StudentPriorityQueue()
    for student in (_ivy(), _alex(), _max_both()):
        pop_queue.insert(student)
    while not pop_queue.is_empty():
        print(format_with_score(pop_queue.extract_max()))

    print("\n6. ITERATION")
    iter_queue = StudentPriorityQueue()
    for student in (_ivy(), _alex(), _max_both()):
        iter_queue.insert(student)
    for student in iter_queue:
        print(f"  - {format_details(student)}")
    print(f"\nQueue size after iteration: {iter_queue.size()}")
    print(f"Top student after iteration: {iter_queue.peek()}")

    print("\n=== Demo Complete ===")
