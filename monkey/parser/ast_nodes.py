"""
Abstract Syntax Tree node definitions for Monkey.

Every node keeps the token it was built from and supports two operations:
`token_literal()` returns that token's literal, and `str()` reconstructs
the node's surface syntax for debugging. The set of node classes is closed;
new grammar forms are added here, not by duck typing elsewhere.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..lexer.tokens import Token


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Node') -> Any:
        """Visit a generic AST node."""
        pass


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def token_literal(self) -> str:
        """Literal of the token this node was built from."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        """Surface syntax of the node, for debugging."""
        pass

    def children(self) -> List['Node']:
        """Get all child nodes."""
        return []

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


class Statement(Node):
    """Base class for statements."""
    pass


class Expression(Node):
    """Base class for expressions."""
    pass


# ============================================================================
# Expressions
# ============================================================================

class Identifier(Expression):
    """Reference to a variable or function name."""
    token: Token            # the IDENT token
    value: str

    def __init__(self, token: Token, value: str):
        self.token = token
        self.value = value

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Statements
# ============================================================================

class LetStatement(Statement):
    """`let <name> = <value>;`"""
    token: Token            # the LET token
    name: Identifier
    value: Optional[Expression]

    def __init__(self, token: Token, name: Identifier, value: Optional[Expression] = None):
        self.token = token
        self.name = name
        self.value = value

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        out = f"{self.token_literal()} {self.name} = "
        if self.value is not None:
            out += str(self.value)
        return out + ";"

    def children(self) -> List[Node]:
        children: List[Node] = [self.name]
        if self.value is not None:
            children.append(self.value)
        return children


class ReturnStatement(Statement):
    """`return <value>;`"""
    token: Token            # the RETURN token
    return_value: Optional[Expression]

    def __init__(self, token: Token, return_value: Optional[Expression] = None):
        self.token = token
        self.return_value = return_value

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        out = f"{self.token_literal()} "
        if self.return_value is not None:
            out += str(self.return_value)
        return out + ";"

    def children(self) -> List[Node]:
        return [self.return_value] if self.return_value is not None else []


class ExpressionStatement(Statement):
    """A statement consisting of a single expression, e.g. `x + 10;`."""
    token: Token            # first token of the expression
    expression: Optional[Expression]

    def __init__(self, token: Token, expression: Optional[Expression] = None):
        self.token = token
        self.expression = expression

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        if self.expression is not None:
            return str(self.expression)
        return ""

    def children(self) -> List[Node]:
        return [self.expression] if self.expression is not None else []


# ============================================================================
# Top-level
# ============================================================================

class Program(Node):
    """Root AST node representing a complete program."""
    statements: List[Statement]

    def __init__(self, statements: Optional[List[Statement]] = None):
        self.statements = statements if statements is not None else []

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)

    def children(self) -> List[Node]:
        return list(self.statements)
