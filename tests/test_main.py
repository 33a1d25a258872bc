from main import main, run_sql


def test_run_sql_prints_columns(capsys):
	assert run_sql("INSERT INTO table (`WEIGHT, in kg`, 'height in cm.')") is True
	out = capsys.readouterr().out
	assert "`WEIGHT, in kg`\n'height in cm.'\n" in out
	assert "[错误]" not in out


def test_run_sql_reports_errors(capsys):
	assert run_sql("INSERT INTO t (a, 'b", show_tokens=True) is False
	out = capsys.readouterr().out
	assert "Token(IDENTIFIER, 'a'" in out
	assert "[错误] unclosed single quote" in out


def test_main_with_file(tmp_path, capsys):
	path = tmp_path / "inserts.sql"
	path.write_text("INSERT INTO a(x, y)\n\nINSERT INTO b (`z`)\n", encoding="utf-8")
	assert main(["--file", str(path)]) == 0
	out = capsys.readouterr().out
	assert out.count("=== 输入 SQL ===") == 2
	assert "`z`" in out


def test_main_exit_status_on_error(capsys):
	assert main(["INSERT INTO t (a)", "INSERT INTO t (a; b)"]) == 1
	assert "unexpected character ';'" in capsys.readouterr().out
