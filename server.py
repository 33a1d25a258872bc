from __future__ import annotations

import logging
from typing import List, Dict, Any, Optional

from flask import Flask, request, jsonify

from config import Settings, load_settings
from insert_columns import Lexer, LexError, extract_columns


def format_error(err: Exception) -> Dict[str, Any]:
    return {
        "errorType": err.__class__.__name__,
        "message": str(err),
        "line": getattr(err, "line", None),
        "column": getattr(err, "column", None),
        "expected": getattr(err, "expected", None),
    }


def analyze(sql: str) -> Dict[str, Any]:
    lexer = Lexer(sql)
    tokens = lexer.tokenize()
    errors: List[LexError] = lexer.errors
    return {
        "statement": sql,
        "tokens": [
            {"type": t.type.name, "lexeme": t.lexeme, "line": t.line, "column": t.column}
            for t in tokens
        ],
        "columns": extract_columns(tokens),
        "errors": [format_error(e) for e in errors],
    }


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.logger.setLevel(settings.log_level)

    @app.post("/columns")
    def http_columns():
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            data = {}
        if "queries" in data:
            queries = data["queries"]
        else:
            queries = [data.get("sql", "")]
        if not isinstance(queries, list) or not queries:
            return jsonify({"ok": False, "error": "queries must be a non-empty list"}), 400
        for sql in queries:
            if not isinstance(sql, str) or not sql.strip():
                return jsonify({"ok": False, "error": "SQL must not be empty"}), 400
            if len(sql) > settings.max_query_length:
                return jsonify({
                    "ok": False,
                    "error": f"statement longer than {settings.max_query_length} characters",
                }), 413

        results: List[Dict[str, Any]] = []
        for sql in queries:
            result = analyze(sql)
            if result["errors"]:
                app.logger.warning("%d tokenize error(s) in %r", len(result["errors"]), sql)
            results.append(result)
        return jsonify({"ok": True, "results": results})

    @app.get("/health")
    def http_health():
        return jsonify({"ok": True})

    return app


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    app = create_app(settings)
    app.logger.info("listening on %s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
