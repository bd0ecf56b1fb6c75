"""Parser for Tern function type signatures.

Builds a tree of FnNode objects from the token stream produced by the
tokenizer. Nesting is tracked with an explicit stack, so arbitrarily deep
signatures never hit the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ternexpand.core.models import FnNode
from ternexpand.signature.tokenizer import tokenize

logger = logging.getLogger(__name__)


class SignatureStructureError(Exception):
    """A signature whose token stream breaks the tree's structural rules.

    Raised when a node would receive a second return type, or when tokens
    keep arriving after every open node has been closed.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


def _top(stack: list[FnNode], token: str, position: int) -> FnNode:
    if not stack:
        raise SignatureStructureError(
            message="Unbalanced parentheses",
            details=f"token {token!r} at position {position} follows the outermost ')'",
        )
    return stack[-1]


def _assign_ret(node: FnNode, value: str | FnNode, position: int) -> None:
    if node.ret is not None:
        raise SignatureStructureError(
            message="Return type assigned twice",
            details=f"token at position {position} follows an existing return type",
        )
    node.ret = value


def parse_tokens(tokens: Iterable[str]) -> FnNode:
    """Build the parse tree for a token stream.

    The returned node is a synthetic root; the parsed type is its ``ret``.
    The first token is in return position, which is what places the
    outermost type on the root. After that, content is in argument position
    except directly after a ``>``.

    Args:
        tokens: Tokens as produced by ``tokenize``.

    Returns:
        The synthetic root node.

    Raises:
        SignatureStructureError: If a return type is assigned twice or a
            token arrives after the root has been closed.
    """
    root = FnNode()
    stack = [root]
    # A return type attaches to the node that most recently closed.
    last_closed = root
    args_mode = False

    for position, token in enumerate(tokens):
        if token == "(":
            node = FnNode()
            if args_mode:
                _top(stack, token, position).args.append(node)
            else:
                _assign_ret(last_closed, node, position)
            stack.append(node)
        elif token == ")":
            last_closed = _top(stack, token, position)
            stack.pop()
        elif token in (">", ","):
            pass
        elif args_mode:
            _top(stack, token, position).args.append(token)
        else:
            _assign_ret(last_closed, token, position)

        args_mode = token != ">"

    if len(stack) > 1:
        logger.debug(f"Signature ended with {len(stack) - 1} unclosed function type(s)")

    return root


def parse_tree(text: str) -> FnNode:
    """Parse signature text and return the synthetic root node.

    Args:
        text: Raw signature text.

    Returns:
        The synthetic root; ``root.ret`` holds the parsed type.
    """
    return parse_tokens(tokenize(text))


def parse(text: str) -> FnNode | str | None:
    """Parse signature text into its top-level type.

    Args:
        text: Raw signature text, e.g. ``fn(a, b) -> number``.

    Returns:
        An FnNode for function types, the bare type string for non-function
        types such as ``number``, or None for empty input.
    """
    return parse_tree(text).ret
