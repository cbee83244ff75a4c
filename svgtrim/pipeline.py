"""The ordered pass list and the loop that runs it."""

import logging

from .document import Document
from .options import Options
from .passes import (
    CollapseGroups,
    CollapseWhitespace,
    DropPrologDeclarations,
    MinifyColors,
    MinifyNumbers,
    MinifyPaths,
    MinifyStyles,
    RemoveComments,
    RemoveDefaultAttrs,
    RemoveEditorNamespaces,
    RemoveHiddenEmpty,
    RemoveMetadata,
    SortAttributes,
)

logger = logging.getLogger(__name__)

PIPELINE = (
    DropPrologDeclarations(),
    RemoveComments(),
    RemoveMetadata(),
    RemoveEditorNamespaces(),
    CollapseGroups(),
    RemoveHiddenEmpty(),
    MinifyPaths(),
    MinifyNumbers(),
    MinifyColors(),
    MinifyStyles(),
    RemoveDefaultAttrs(),
    CollapseWhitespace(),
    SortAttributes(),
)

# Each round can only shrink the tree; in practice it settles in two.
MAX_ROUNDS = 8


def optimize(document: Document, options: Options | None = None, passes=PIPELINE) -> Document:
    """Run ``passes`` over ``document`` until a whole round changes nothing.

    Running to a fixpoint means feeding the output back in finds nothing
    more to do, even where one pass uncovers work for an earlier one (a
    group that loses its last default attribute can then be collapsed).
    """
    if options is None:
        options = Options()
    for round_number in range(1, MAX_ROUNDS + 1):
        total = 0
        for step in passes:
            if not step.enabled(options):
                continue
            changes = step.apply(document, options)
            logger.debug("round %d: %s made %d change(s)", round_number, step.name, changes)
            total += changes
        if not total:
            break
    else:
        logger.debug("stopped after %d rounds with changes still pending", MAX_ROUNDS)
    return document
