"""Compiler-construction tools: lexing, parsing, grammar analysis, automata and code generation."""

__version__ = "0.1.0"