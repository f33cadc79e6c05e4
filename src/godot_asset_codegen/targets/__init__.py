"""Render targets for generated lookup modules.

Each target lives in its own package and registers its renderer with
the TargetRegistry when imported.
"""

# Target packages are imported dynamically by TargetRegistry.discover_targets()
