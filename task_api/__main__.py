"""Run the server with ``python -m task_api``."""

from task_api.main import run

if __name__ == "__main__":
    run()
