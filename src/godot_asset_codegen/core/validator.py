"""Manifest validation.

A manifest is checked in two steps: its shape against the JSON Schema
shipped in the package, then the invariants the schema cannot express
(unique identifiers per category, resource paths matching their
relative paths).
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .errors import ManifestError
from .types import RESOURCE_PREFIX, Manifest

SCHEMA_NAME = "asset_manifest.schema.json"

CATEGORY_KEYS = ("prefabs", "scenes")


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the manifest JSON Schema from package data.

    Raises:
        FileNotFoundError: If the schema is not installed with the package
        json.JSONDecodeError: If the schema is invalid JSON
    """
    resource = files("godot_asset_codegen") / "schemas" / SCHEMA_NAME
    return json.loads(resource.read_text(encoding="utf-8"))  # type: ignore[no-any-return]


def manifest_problems(manifest: Manifest) -> list[str]:
    """List the invariant violations of a schema-valid manifest."""
    problems = []

    for key in CATEGORY_KEYS:
        seen: set[str] = set()
        for index, entry in enumerate(manifest[key]):  # type: ignore[literal-required]
            identifier = entry["identifier"]
            where = f"{key}[{index}]"

            if not identifier.isidentifier():
                problems.append(f"{where}: '{identifier}' is not a valid identifier")
            if identifier in seen:
                problems.append(f"{where}: duplicate identifier '{identifier}'")
            seen.add(identifier)

            expected = f"{RESOURCE_PREFIX}{entry['relative_path']}"
            if entry["resource_path"] != expected:
                problems.append(
                    f"{where}: resource_path '{entry['resource_path']}' does not match '{expected}'"
                )

    return problems


def validate_manifest(manifest: Manifest) -> None:
    """Validate a manifest's shape and invariants.

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        ManifestError: If identifiers repeat or paths disagree
    """
    jsonschema.validate(instance=manifest, schema=load_schema())

    problems = manifest_problems(manifest)
    if problems:
        raise ManifestError(problems)


def validate_manifest_with_error_details(manifest: Manifest) -> tuple[bool, str | None]:
    """Validate a manifest and describe the first failure.

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        return False, f"Validation error at {error_path}: {e.message}"
    except ManifestError as e:
        return False, f"Inconsistent manifest: {e}"
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
