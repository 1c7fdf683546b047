"""In-memory task storage.

The store lives as long as the application that owns it; nothing is persisted.
"""

from task_api.errors import NotFoundError
from task_api.models import Task, TaskCreate, TaskUpdate

INITIAL_TASKS: tuple[tuple[str, bool], ...] = (
    ("First task", False),
    ("Second task", True),
)

SEED_TASKS: tuple[tuple[str, bool], ...] = (
    ("Sample task 1", False),
    ("Sample task 2", False),
)


class TaskStore:
    """Simple in-memory task storage with sequential ids."""

    def __init__(self, initial: tuple[tuple[str, bool], ...] = INITIAL_TASKS) -> None:
        """Initialize the store with ``initial`` as ``(title, completed)`` pairs."""
        self._tasks: list[Task] = []
        self._next_id = 1
        self._load(initial)

    def _load(self, rows: tuple[tuple[str, bool], ...]) -> None:
        self._tasks = [
            Task(id=i, title=title, completed=completed)
            for i, (title, completed) in enumerate(rows, start=1)
        ]
        self._next_id = len(self._tasks) + 1

    def _index(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise NotFoundError()

    @property
    def next_id(self) -> int:
        """The id the next created task will receive."""
        return self._next_id

    def list_all(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task:
        """Get a task by its ID. Raises NotFoundError if absent."""
        return self._tasks[self._index(task_id)]

    def create(self, data: TaskCreate) -> Task:
        """Create a new task and return it."""
        task = Task(id=self._next_id, title=data.title, completed=False)
        self._next_id += 1
        self._tasks.append(task)
        return task

    def replace(self, task_id: int, data: TaskUpdate) -> Task:
        """Replace title and completed of an existing task."""
        i = self._index(task_id)
        updated = self._tasks[i].model_copy(
            update={"title": data.title, "completed": data.completed}
        )
        self._tasks[i] = updated
        return updated

    def toggle(self, task_id: int) -> Task:
        """Flip the completed flag of an existing task."""
        i = self._index(task_id)
        task = self._tasks[i]
        updated = task.model_copy(update={"completed": not task.completed})
        self._tasks[i] = updated
        return updated

    def delete(self, task_id: int) -> Task:
        """Delete a task and return it."""
        return self._tasks.pop(self._index(task_id))

    def clear(self) -> None:
        """Remove every task. Ids already handed out are not reused."""
        self._tasks.clear()

    def seed(self) -> list[Task]:
        """Reset to the sample tasks; the next created task gets id 3."""
        self._load(SEED_TASKS)
        return self.list_all()
