import json

from did_url.parser import main

TEST_DID = "did:elastos:icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN"


def test_main_parse(capsys):
    assert main([TEST_DID + ";bar=123/path?qkeyonly#frag"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result == {
        "url": TEST_DID + ";bar=123/path?qkeyonly#frag",
        "did": TEST_DID,
        "method": "elastos",
        "methodSpecificId": "icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN",
        "params": {"bar": "123"},
        "path": "/path",
        "query": {"qkeyonly": None},
        "fragment": "frag",
    }


def test_main_relative(capsys):
    assert main(["--base", TEST_DID, "test"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["url"] == TEST_DID + "#test"
    assert result["fragment"] == "test"


def test_main_canonical(capsys):
    assert main(["--canonical", TEST_DID + "?b=2&a=1"]) == 0
    out = capsys.readouterr().out.strip()
    assert "\n" not in out
    assert " " not in out
    assert out.startswith('{"did":')
    assert json.loads(out)["query"] == {"b": "2", "a": "1"}


def test_main_invalid(capsys):
    assert main(["elastos:icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    error = json.loads(captured.err)
    assert error["error"] == "invalidDidUrl"
    assert "elastos:icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN" in error["errorMessage"]
