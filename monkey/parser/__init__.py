"""
Monkey Parser Package

Holds the abstract syntax tree node definitions a Monkey parser builds from
the lexer's token stream. Every node can report the literal of the token it
came from and render itself back to source-like text.
"""

from .ast_nodes import (
    ASTVisitor, Node, Statement, Expression,
    Identifier, LetStatement, ReturnStatement, ExpressionStatement, Program,
)

__all__ = [
    "ASTVisitor", "Node",
    "Statement", "Expression",
    "Identifier",
    "LetStatement", "ReturnStatement", "ExpressionStatement",
    "Program",
]
