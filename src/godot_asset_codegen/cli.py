"""Command-line interface for the asset code generator.

This module provides the CLI entry point for generating Prefab and
Scene lookup modules from a Godot project.
"""

import argparse
import json
import os
import sys
import tempfile
from collections.abc import Sequence
from pathlib import Path

from .config import PROJECT_DIR_PROPERTY
from .core.validator import validate_manifest_with_error_details
from .manifest import build_manifest
from .pipeline import GenerationResult
from .registry import TargetRegistry
from .scanner import discover_candidates


def generate(
    project_dir: Path,
    target: str,
    namespace: str | None = None,
    files: Sequence[str] | None = None,
) -> GenerationResult:
    """Generate both lookup modules for a project.

    Args:
        project_dir: Godot project directory (its name is the root folder)
        target: Registered render target name
        namespace: Namespace for generated code, defaults to the folder name
        files: Candidate files; the project directory is scanned if omitted

    Returns:
        GenerationResult with both modules

    Raises:
        ValueError: If the target is unknown or generation fails
    """
    project_dir_abs = project_dir.resolve()

    if files is None:
        print(f"Scanning directory: {project_dir_abs}", file=sys.stderr)
        files = discover_candidates(project_dir_abs)
    else:
        # Same form as scanned paths: absolute, symlinks resolved
        files = [str(Path(f).resolve()) for f in files]

    pipeline = TargetRegistry.create_pipeline(
        target,
        namespace=namespace or project_dir_abs.name,
        properties={PROJECT_DIR_PROPERTY: str(project_dir_abs)},
    )
    result = pipeline.run(files)

    print(
        f"Found {len(result.prefabs.entries)} prefabs and {len(result.scenes.entries)} scenes",
        file=sys.stderr,
    )
    return result


def write_outputs(outputs: dict[Path, str]) -> None:
    """Write every output file or none of them.

    Each file is staged as a temporary sibling; the files are renamed
    into place only after all of them were written.

    Raises:
        OSError: If any file cannot be written; staged files are removed
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for path, text in outputs.items():
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                staged.append((Path(f.name), path))
                f.write(text)
    except OSError:
        for temp_path, _ in staged:
            temp_path.unlink(missing_ok=True)
        raise

    for temp_path, path in staged:
        os.replace(temp_path, path)
        print(f"Wrote {path}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the code generator."""
    TargetRegistry.discover_targets()

    parser = argparse.ArgumentParser(
        description="Generate typed Prefab/Scene lookup modules for a Godot project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scan the project and print Python modules to stdout
  godot-asset-codegen --project-dir ~/dev/my_game

  # Write C# sources for a .NET project
  godot-asset-codegen --project-dir ~/dev/my_game --target csharp \\
      --namespace MyGame --output-dir ~/dev/my_game/Generated

  # Use an explicit file list and export a JSON manifest
  godot-asset-codegen --project-dir ~/dev/my_game --manifest assets.json \\
      ~/dev/my_game/Scenes/main.tscn ~/dev/my_game/Prefabs/door.tscn
        """,
    )

    parser.add_argument(
        "--project-dir",
        required=True,
        help="Godot project directory; its name is the res:// root",
    )

    parser.add_argument(
        "--target",
        default="python",
        choices=TargetRegistry.list_targets(),
        help="Language of the generated modules (default: python)",
    )

    parser.add_argument("--namespace", help="Namespace of generated code (default: project folder name)")

    parser.add_argument("--output-dir", help="Directory to write modules to (default: stdout)")

    parser.add_argument("--manifest", help="Also write a JSON manifest of identifiers to this path")

    parser.add_argument(
        "files",
        nargs="*",
        help="Candidate scene files (default: scan the project directory)",
    )

    args = parser.parse_args(argv)

    project_dir = Path(args.project_dir)
    if not project_dir.is_dir():
        print(f"Error: Project directory does not exist: {project_dir}", file=sys.stderr)
        sys.exit(1)

    try:
        result = generate(
            project_dir,
            target=args.target,
            namespace=args.namespace,
            files=args.files or None,
        )

        manifest = build_manifest(result)
        if args.manifest:
            is_valid, error_msg = validate_manifest_with_error_details(manifest)
            if not is_valid:
                print("Error: Manifest validation failed:", file=sys.stderr)
                print(error_msg, file=sys.stderr)
                sys.exit(1)

        outputs: dict[Path, str] = {}
        if args.output_dir:
            output_dir = Path(args.output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            for module in result.modules:
                outputs[output_dir / module.filename] = module.source
        if args.manifest:
            outputs[Path(args.manifest)] = json.dumps(manifest, indent=2) + "\n"

        write_outputs(outputs)

        if not args.output_dir:
            for module in result.modules:
                print(f"Module: {module.filename}", file=sys.stderr)
                sys.stdout.write(module.source)

    except (ValueError, OSError) as e:
        print(f"Error: Failed to generate asset modules: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
