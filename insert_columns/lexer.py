import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional


logger = logging.getLogger(__name__)


class TokenType(Enum):
	QUOTED = auto()
	IDENTIFIER = auto()
	PUNCTUATION = auto()


# 非引号标识符允许的字符，只读
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
WHITESPACE = frozenset(" \t\n")
PUNCTUATION = frozenset("(),.")
QUOTES = {
	"`": "backtick",
	"'": "single",
}


@dataclass
class Token:
	type: TokenType
	lexeme: str
	line: int
	column: int

	@property
	def quote(self) -> Optional[str]:
		if self.type == TokenType.QUOTED:
			return self.lexeme[0]
		return None

	def unquoted(self) -> str:
		"""Content between the delimiters of a quoted token, escapes kept as-is."""
		if self.type == TokenType.QUOTED:
			return self.lexeme[1:-1]
		return self.lexeme

	def __repr__(self) -> str:
		return f"Token({self.type.name}, {self.lexeme!r}, line={self.line}, col={self.column})"


class LexError(Exception):
	def __init__(self, message: str, line: int = None, column: int = None, expected: str = None):
		super().__init__(message)
		self.line = line
		self.column = column
		self.expected = expected


class UnclosedQuoteError(LexError):
	def __init__(self, quote: str, line: int = None, column: int = None):
		self.quote = quote
		self.kind = QUOTES[quote]
		super().__init__(f"unclosed {self.kind} quote at line {line} column {column}", line, column, quote)


class UnexpectedCharacterError(LexError):
	def __init__(self, char: str, line: int = None, column: int = None):
		self.char = char
		super().__init__(f"unexpected character {char!r} at line {line} column {column}", line, column)


class TokenizeError(LexError):
	"""All problems found during one tokenization pass."""

	def __init__(self, errors: List[LexError]):
		self.errors = list(errors)
		first = self.errors[0] if self.errors else None
		super().__init__(
			"\n".join(str(e) for e in self.errors),
			first.line if first else None,
			first.column if first else None,
			first.expected if first else None,
		)


class Lexer:
	def __init__(self, source: str):
		self.source = source
		self.length = len(source)
		self.index = 0
		self.line = 1
		self.col = 1
		self.errors: List[LexError] = []

	@property
	def error(self) -> Optional[TokenizeError]:
		if not self.errors:
			return None
		return TokenizeError(self.errors)

	def raise_for_errors(self) -> None:
		err = self.error
		if err is not None:
			raise err

	def tokenize(self) -> List[Token]:
		tokens: List[Token] = []
		while self.index < self.length:
			start_line = self.line
			start_col = self.col
			c = self._advance()
			if c in WHITESPACE:
				continue
			if c in QUOTES:
				lexeme = self._read_quoted(c, start_line, start_col)
				if lexeme is None:
					# 输入已耗尽
					break
				tokens.append(Token(TokenType.QUOTED, lexeme, start_line, start_col))
			elif c in IDENTIFIER_CHARS:
				lexeme = self._read_identifier(c)
				tokens.append(Token(TokenType.IDENTIFIER, lexeme, start_line, start_col))
			elif c in PUNCTUATION:
				tokens.append(Token(TokenType.PUNCTUATION, c, start_line, start_col))
			else:
				self._error(UnexpectedCharacterError(c, start_line, start_col))
		return tokens

	def _peek(self) -> str:
		if self.index >= self.length:
			return ""
		return self.source[self.index]

	def _advance(self) -> str:
		c = self._peek()
		if not c:
			return c
		self.index += 1
		if c == "\n":
			self.line += 1
			self.col = 1
		else:
			self.col += 1
		return c

	def _error(self, err: LexError) -> None:
		logger.debug("lex error: %s", err)
		self.errors.append(err)

	def _read_identifier(self, first: str) -> str:
		chars: List[str] = [first]
		while self._peek() and self._peek() in IDENTIFIER_CHARS:
			chars.append(self._advance())
		return ''.join(chars)

	def _read_quoted(self, quote: str, start_line: int, start_col: int) -> Optional[str]:
		chars: List[str] = [quote]
		backslashes = 0
		while True:
			c = self._advance()
			if not c:
				self._error(UnclosedQuoteError(quote, start_line, start_col))
				return None
			chars.append(c)
			# 奇数个连续反斜杠表示转义
			if c == quote and backslashes % 2 == 0:
				return ''.join(chars)
			if c == '\\':
				backslashes += 1
			else:
				backslashes = 0
