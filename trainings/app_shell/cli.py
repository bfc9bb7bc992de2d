import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from trainings.components.catalog import (
    CancelTrainingInput,
    CatalogComponent,
    CreateTrainingInput,
    SearchTrainingsInput,
    UpdateStatusInput,
)
from trainings.domain.entities import Training
from trainings.rules.loader import load_rules
from trainings.rules.models import Rules, default_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str | None) -> Rules:
    if path is None:
        if Path(RULES_PATH).exists():
            return load_rules(Path(RULES_PATH))
        return default_rules()

    rules_path = Path(path)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)
    return load_rules(rules_path)


def parse_day(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got {value!r}") from e


def describe(training: Training) -> str:
    return f"{training.date:%Y-%m-%d}  {training.title}  [{training.status.type}]"


def _as_datetime(value: Any) -> Any:
    # YAML gives a plain date for "2025-06-01"
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, datetime.min.time())
    # Trainings carry naive local times; offsets from the file are folded in
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def load_trainings(path: Path, catalog: CatalogComponent) -> list[Training]:
    """Load training records from YAML, skipping (and reporting) invalid ones."""
    with open(path) as f:
        data = yaml.safe_load(f) or []

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of trainings in {path}")

    trainings: list[Training] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            logger.warning(f"Record {index} skipped: not a mapping")
            continue
        try:
            inp = CreateTrainingInput(
                title=record["title"],
                description=record["description"],
                date=_as_datetime(record["date"]),
                location=record["location"],
                capacity=record["capacity"],
                level=record["level"],
                price=record["price"],
            )
        except KeyError as e:
            logger.warning(f"Record {index} skipped: missing field {e}")
            continue

        out = catalog.run_create(inp)
        if out.training is None:
            logger.warning(f"Record {index} skipped: {out.errors[0].message}")
            continue
        trainings.append(out.training)
    return trainings


def handle_search(catalog: CatalogComponent, args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.exists():
        logger.error(f"File {path} not found.")
        sys.exit(1)

    try:
        trainings = load_trainings(path, catalog)
    except (yaml.YAMLError, ValueError) as e:
        logger.error(f"Cannot read trainings from {path}: {e}")
        sys.exit(1)

    out = catalog.run_search(
        SearchTrainingsInput(
            trainings=tuple(trainings),
            start_date=args.start,
            end_date=args.end,
        )
    )
    print(f"Found {out.total} trainings.")
    for training in out.trainings:
        print(f" - {describe(training)}")


def handle_demo(catalog: CatalogComponent) -> None:
    print("1. Create")
    created = catalog.run_create(
        CreateTrainingInput(
            title="Introduction to Agile",
            description="Agile fundamentals for beginners",
            date=datetime(2025, 6, 1, 10, 0),
            location="Chiyoda, Tokyo",
            capacity=20,
            level="beginner",
            price=50000,
        )
    )
    second = catalog.run_create(
        CreateTrainingInput(
            title="Scrum Master Training",
            description="The role of the scrum master",
            date=datetime(2025, 5, 15, 10, 0),
            location="Shibuya, Tokyo",
            capacity=15,
            level="intermediate",
            price=70000,
        )
    )
    if created.training is None or second.training is None:
        for err in created.errors + second.errors:
            print(f"   error: {err.message}")
        return
    print(f"   {describe(created.training)}")
    print(f"   {describe(second.training)}")

    print("2. Lifecycle")
    refused = catalog.run_update_status(UpdateStatusInput(created.training, "completed"))
    print(f"   draft -> completed: {refused.errors[0].message}")
    opened = catalog.run_update_status(UpdateStatusInput(created.training, "open"))
    assert opened.training is not None
    print(f"   {describe(opened.training)}")
    completed = catalog.run_update_status(UpdateStatusInput(opened.training, "completed"))
    assert completed.training is not None
    print(f"   {describe(completed.training)}")
    canceled = catalog.run_cancel(CancelTrainingInput(second.training, "Instructor unavailable"))
    assert canceled.training is not None
    print(f"   {describe(canceled.training)}")

    print("3. Search 2025-05-01 .. 2025-06-30")
    found = catalog.run_search(
        SearchTrainingsInput(
            trainings=(completed.training, canceled.training),
            start_date=date(2025, 5, 1),
            end_date=date(2025, 6, 30),
        )
    )
    print(f"   Found {found.total} trainings.")
    for training in found.trainings:
        print(f"   - {describe(training)}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Training Catalog CLI")
    parser.add_argument("--rules", help=f"Path to rules file (default: {RULES_PATH})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # demo
    subparsers.add_parser("demo", help="Walk through create, lifecycle and search")

    # search
    search_parser = subparsers.add_parser("search", help="Search trainings in a YAML file")
    search_parser.add_argument("file", help="YAML file with a list of trainings")
    search_parser.add_argument("--start", required=True, type=parse_day, help="YYYY-MM-DD")
    search_parser.add_argument("--end", required=True, type=parse_day, help="YYYY-MM-DD")

    args = parser.parse_args(argv)

    catalog = CatalogComponent(rules=get_rules(args.rules))

    if args.command == "demo":
        handle_demo(catalog)
    elif args.command == "search":
        handle_search(catalog, args)


if __name__ == "__main__":
    main()
