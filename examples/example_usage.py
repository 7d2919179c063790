"""Example: use the service layer directly (no interactive shell).

The shell is only a thin layer; registration and aggregation live in WorkRegistry.
"""

from salary_system.container import build_container
from salary_system.core.exceptions import ValidationError
from salary_system.works.model import WorkEntry


def main():
    container = build_container(language="en")
    registry = container.registry

    registry.add(WorkEntry.simple("Manager", 500000))
    registry.add(WorkEntry.with_bonus("Sales", 400000, 50))

    try:
        registry.add(WorkEntry.with_bonus("Exec", 900000, 50))
    except ValidationError as exc:
        print("rejected:", container.messages.render_error(exc))

    for line in registry.list_all(container.messages.format_work).lines:
        print(line)
    print("average:", container.messages.money(registry.average_salary()))


if __name__ == "__main__":
    main()
