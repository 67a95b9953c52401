import json

from cli import main


def test_parse_single_file(tmp_path, capsys):
	p = tmp_path / "user.ez"
	p.write_text("ns App\nc User\ns name # the user's name\n")
	assert main(["parse", str(p)]) == 0
	out = json.loads(capsys.readouterr().out)
	assert out["namespaces"][0]["classes"][0]["properties"][0]["description"] == "the user's name"


def test_parse_directory(tmp_path, capsys):
	(tmp_path / "a.ez").write_text("ns A\n")
	(tmp_path / "b.ez").write_text("ns B\n")
	(tmp_path / "readme.md").write_text("not notation\n")
	assert main(["parse", str(tmp_path)]) == 0
	out = json.loads(capsys.readouterr().out)
	assert [f["namespaces"][0]["name"] for f in out["files"]] == ["A", "B"]


def test_parse_error_exits_nonzero(tmp_path, capsys):
	p = tmp_path / "bad.ez"
	p.write_text("s orphan\n")
	assert main(["parse", str(p)]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert "MISSING_CONTAINER" in captured.err
	assert "bad.ez:1" in captured.err
