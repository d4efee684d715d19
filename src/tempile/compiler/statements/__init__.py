"""Node lowering for the tempile compiler.

Provides mixins that lower tempile AST nodes into chunks.

The statements package is organized into logical modules:
- basic: Leaf nodes (text, doctype, comment, expr, raw expr, raw code, import)
- elements: Markup elements and attributes
- control_flow: Control flow (if, elseif, else, for)

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from tempile.compiler.statements.basic import BasicLoweringMixin
from tempile.compiler.statements.control_flow import ControlFlowMixin
from tempile.compiler.statements.elements import ElementLoweringMixin


class StatementLoweringMixin(
    BasicLoweringMixin,
    ElementLoweringMixin,
    ControlFlowMixin,
):
    """Combined mixin for lowering all node kinds.

    This class combines all lowering mixins into a single interface that
    can be inherited by the Compiler class.
    """
