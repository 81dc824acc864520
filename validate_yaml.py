#!/usr/bin/env python3
"""Validate fleet YAML files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError

import config


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def find_duplicate_task_ids(data: dict) -> list[str]:
    """Task ids must be unique within a fleet file."""
    seen = set()
    duplicates = []
    for task in data.get("tasks") or []:
        task_id = str(task.get("id"))
        if task_id in seen and task_id not in duplicates:
            duplicates.append(task_id)
        seen.add(task_id)
    return duplicates


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        for task_id in find_duplicate_task_ids(data):
            errors.append(f"Duplicate task id: {task_id}")
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main():
    """Validate all fleet YAML files in the fleet directory."""
    schema = load_schema()
    fleet_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else config.FLEET_DIR

    if not fleet_dir.exists():
        print(f"Error: fleet directory not found: {fleet_dir}")
        return 1

    yaml_files = list(fleet_dir.glob("*.yaml")) + list(fleet_dir.glob("*.yml"))

    if not yaml_files:
        print(f"Warning: No YAML files found in {fleet_dir}")
        return 0

    all_valid = True
    for filepath in sorted(yaml_files):
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
