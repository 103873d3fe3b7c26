"""
Import Fixer Package.

Provides the file-scoped ``ImportTable`` and the ``ImportReconciler`` responsible for:
1.  **Injection**: Adding the replacement package under its canonical alias.
2.  **Canonicalization**: Renaming and merging existing imports of that package.
3.  **Pruning**: Removing the deprecated package once nothing refers to it.
"""

from go_rewriter.core.import_fixer.reconciler import ImportReconciler, ImportState, repoint
from go_rewriter.core.import_fixer.table import ImportTable
from go_rewriter.core.import_fixer.utils import assumed_name

__all__ = ["ImportReconciler", "ImportState", "ImportTable", "assumed_name", "repoint"]
