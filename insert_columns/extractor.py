from typing import List

from .lexer import Token, TokenType


def _is_punct(tok: Token, ch: str) -> bool:
	return tok.type == TokenType.PUNCTUATION and tok.lexeme == ch


class ColumnExtractor:
	"""
	从 token 流中取出第一个 '(' 与其后第一个 ')' 之间的列名。
	不做括号嵌套匹配：INSERT 的列清单里没有子表达式，
	引号内的括号已经在词法阶段并入引号 token。
	"""

	def __init__(self, tokens: List[Token]):
		self.tokens = tokens

	def columns(self) -> List[str]:
		columns: List[str] = []
		opened = False
		for tok in self.tokens:
			if not opened:
				opened = _is_punct(tok, '(')
				continue
			if _is_punct(tok, ')'):
				break
			if _is_punct(tok, ','):
				continue
			columns.append(tok.lexeme)
		return columns


def extract_columns(tokens: List[Token]) -> List[str]:
	return ColumnExtractor(tokens).columns()
