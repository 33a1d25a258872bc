from typing import List, Optional, Tuple

from .lexer import (
	Lexer,
	Token,
	TokenType,
	LexError,
	UnclosedQuoteError,
	UnexpectedCharacterError,
	TokenizeError,
	IDENTIFIER_CHARS,
)
from .extractor import ColumnExtractor, extract_columns


def extract_insert_columns(sql: str) -> Tuple[List[str], Optional[TokenizeError]]:
	"""
	Columns of the first ``(...)`` group in an INSERT statement.

	Tokenization problems do not raise; they come back as the second element
	and the columns are taken from whatever tokens were produced.
	"""
	lexer = Lexer(sql)
	tokens = lexer.tokenize()
	return extract_columns(tokens), lexer.error


__all__ = [
	"Lexer",
	"Token",
	"TokenType",
	"LexError",
	"UnclosedQuoteError",
	"UnexpectedCharacterError",
	"TokenizeError",
	"IDENTIFIER_CHARS",
	"ColumnExtractor",
	"extract_columns",
	"extract_insert_columns",
]
