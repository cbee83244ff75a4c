"""Common shape of a pipeline pass."""

from ..document import Document
from ..options import Options


class Pass:
    """One tree transformation.

    ``option`` names the Options field that switches the pass on; passes
    without one always run. ``apply`` edits the document in place and
    returns how many changes it made, zero meaning the tree is untouched.
    """

    name = ""
    option: str | None = None

    def enabled(self, options: Options) -> bool:
        return self.option is None or getattr(options, self.option)

    def apply(self, document: Document, options: Options) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
