"""
命令行入口：SQL → Token 流 → 列清单
"""

import logging
import sys

from insert_columns import Lexer, extract_columns


def run_sql(sql: str, show_tokens: bool = False) -> bool:
    """
    处理单条 INSERT 语句，打印抽取到的列。
    返回 False 表示词法分析中出现了错误（列清单可能不完整）。
    """
    print("\n=== 输入 SQL ===")
    print(sql)

    lexer = Lexer(sql)
    tokens = lexer.tokenize()
    if show_tokens:
        print("\n[Token 流]")
        for t in tokens:
            print(t)

    print("\n[列]")
    for col in extract_columns(tokens):
        print(col)

    err = lexer.error
    if err is not None:
        for e in err.errors:
            print(f"[错误] {e}")
        return False
    return True


def read_statements(path: str):
    # 每行一条语句，忽略空行
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            stmt = line.strip()
            if stmt:
                yield stmt


def main(argv=None) -> int:
    import argparse
    parser = argparse.ArgumentParser(description="INSERT 列名抽取 CLI")
    parser.add_argument("sql", nargs="*", help="INSERT 语句（可多条）")
    parser.add_argument("--file", dest="file", help="SQL 文件路径，每行一条语句（可选）", default=None)
    parser.add_argument("--tokens", action="store_true", help="同时打印 Token 流")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.file:
        statements = list(read_statements(args.file))
    elif args.sql:
        statements = args.sql
    else:
        statements = [line.strip() for line in sys.stdin if line.strip()]

    ok = True
    for sql in statements:
        if not run_sql(sql, show_tokens=args.tokens):
            ok = False
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
