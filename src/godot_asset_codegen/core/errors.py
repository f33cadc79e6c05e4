"""Errors raised while deriving and emitting asset identifiers.

Every error subclasses ValueError so callers that only care about
"bad input" can keep catching ValueError.
"""


class CodegenError(ValueError):
    """Base class for generation failures."""


class AssetPathError(CodegenError):
    """An asset path cannot be turned into a resource path or identifier."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class RootSegmentNotFoundError(AssetPathError):
    """The project root folder does not appear in an asset path.

    Raised for assets outside the project and when the root folder
    name could not be resolved at all.
    """

    def __init__(self, path: str, root_folder: str):
        self.root_folder = root_folder
        if root_folder:
            message = f"Root folder '{root_folder}' not found in file path"
        else:
            message = "Project root folder is unknown, cannot make path relative"
        super().__init__(path, message)


class IdentifierCollisionError(CodegenError):
    """Two distinct asset paths normalize to the same identifier."""

    def __init__(self, identifier: str, first_path: str, second_path: str):
        self.identifier = identifier
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(
            f"Identifier '{identifier}' is generated by both "
            f"'{first_path}' and '{second_path}'"
        )


class ManifestError(CodegenError):
    """A manifest is well-formed JSON but contradicts itself."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))
