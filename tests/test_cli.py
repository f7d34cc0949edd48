"""Tests for opaque.cli — CLI entrypoint and subcommands."""

import pytest

from opaque.cli import main


class TestCLIHelp:
    @pytest.mark.parametrize("args", [["--help"], ["encode", "--help"], ["routes", "--help"]])
    def test_help_exits_zero(self, args: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(args)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    @pytest.mark.parametrize("command", ["encode", "decode", "resolve"])
    def test_missing_argument(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "opaque" in capsys.readouterr().out


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OPAQUE_ROOT", "OPAQUE_CODE_PARAM", "OPAQUE_ERROR_CODE_PARAM", "OPAQUE_DECOY_PARAMS"):
        monkeypatch.delenv(name, raising=False)


class TestEncode:
    def test_encode(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["encode", "/article/42"])
        assert capsys.readouterr().out.strip() == "/v2/#article/42"

    def test_encode_custom_root(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--root", "/s/", "encode", "market"])
        assert capsys.readouterr().out.strip() == "/s/#market"

    def test_encode_decoy(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["encode", "--decoy", "/market"])
        out = capsys.readouterr().out.strip()
        assert out.startswith("/v2/?code=")
        assert "&errorCode=" in out
        assert out.endswith("#market")

    def test_root_from_env(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OPAQUE_ROOT", "/env/")
        main(["encode", "/x"])
        assert capsys.readouterr().out.strip() == "/env/#x"

    def test_invalid_root(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--root", "bad", "encode", "/x"])
        assert exc_info.value.code == 1
        assert "opaque_root" in capsys.readouterr().err


class TestDecode:
    def test_hash(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["decode", "https://example.com/v2/#user/alice"])
        assert capsys.readouterr().out.strip() == "/user/alice"

    def test_legacy_with_error_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["decode", "/v2/?code=t/category/science&errorCode=expired"])
        assert capsys.readouterr().out.strip() == "/"


class TestResolve:
    def test_prints_page_and_params(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "/v2/?code=token123/category/science"])
        assert capsys.readouterr().out.splitlines() == ["category", "slug=science"]

    def test_not_found(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "/v2/#zzz-unknown"])
        assert capsys.readouterr().out.splitlines() == ["not-found"]


class TestRoutes:
    def test_lists_table_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["ORDER", "KIND", "PATTERN", "PAGE"]
        body = "\n".join(lines)
        assert body.index("/postguild/{id}") < body.index("/guild/{id}")
        assert lines[-1].split() == ["-", "fallback", "*", "not-found"]
