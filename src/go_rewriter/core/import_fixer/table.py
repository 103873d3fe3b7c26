"""
Import Table.

A file-scoped view over the import declarations of a `SyntaxTree`. The table
does not copy specs: lookups return the very `ImportSpec` objects owned by the
tree, and mutations (`add`, `remove`, `rename`) edit the tree in place.
"""

from typing import List, Optional, Tuple

from go_rewriter.core.golang.grouping import import_class
from go_rewriter.core.golang.nodes import ImportDecl, ImportSpec, SyntaxTree
from go_rewriter.core.import_fixer.utils import assumed_name, shared_prefix

# cgo reads the comment above a standalone `import "C"`; nothing may join it
CGO_PATH = "C"


class ImportTable:
  """
  Tracks the import entries of a single source file.
  """

  def __init__(self, tree: SyntaxTree):
    self.tree = tree

  @staticmethod
  def local_name(spec: ImportSpec) -> Optional[str]:
    """
    Resolves the identifier a spec binds in the file scope.

    Returns:
        The alias, or the assumed package name. None for blank (`_`) and dot
        (`.`) imports, which cannot qualify identifiers.
    """
    if spec.name in ("_", "."):
      return None
    return spec.name or assumed_name(spec.path)

  def find(self, path: str) -> Optional[ImportSpec]:
    matches = self.find_all(path)
    return matches[0] if matches else None

  def find_all(self, path: str) -> List[ImportSpec]:
    return [spec for spec in self.tree.import_specs() if spec.path == path]

  def bound_path(self, name: str) -> Optional[str]:
    """
    Returns the import path that binds `name`, if any.
    """
    for spec in self.tree.import_specs():
      if self.local_name(spec) == name:
        return spec.path
    return None

  def add(self, path: str, alias: Optional[str]) -> ImportSpec:
    """
    Inserts a new import.

    The spec goes into the declaration holding the import with the longest
    shared path prefix (the first declaration otherwise). It joins the last
    group when that group has the same import class, otherwise it opens a new
    blank-line separated group. Declarations importing "C" are never used. When
    no declaration qualifies, a fresh single declaration is appended after the
    existing ones (or after the package clause).

    Args:
        path: Import path.
        alias: Local name to write, or None.

    Returns:
        ImportSpec: The inserted spec.
    """
    spec = ImportSpec(path=path, name=alias)

    decl = self._choose_decl(path)
    if decl is None:
      self.tree.imports.append(ImportDecl(leading=self.tree.newline * 2, parenthesized=False, groups=[[spec]]))
      return spec

    if decl.specs:
      decl.parenthesized = True

    cls = import_class(path)
    if decl.groups and all(import_class(s.path) == cls for s in decl.groups[-1]):
      decl.groups[-1].append(spec)
    else:
      decl.groups.append([spec])
    return spec

  def remove(self, spec: ImportSpec) -> None:
    """
    Deletes a spec; a declaration left without specs or comments is deleted too.
    """
    for decl in list(self.tree.imports):
      if spec in decl.specs:
        decl.remove(spec)
        if decl.is_empty() and not decl.has_comments():
          self.tree.imports.remove(decl)
        return

  @staticmethod
  def rename(spec: ImportSpec, alias: str) -> None:
    spec.name = alias

  def _choose_decl(self, path: str) -> Optional[ImportDecl]:
    candidates = [decl for decl in self.tree.imports if not any(s.path == CGO_PATH for s in decl.specs)]
    best: Tuple[int, Optional[ImportDecl]] = (0, None)
    for decl in candidates:
      for spec in decl.specs:
        score = shared_prefix(spec.path, path)
        if score > best[0]:
          best = (score, decl)
    if best[1] is not None:
      return best[1]
    return candidates[0] if candidates else None
