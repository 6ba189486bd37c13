"""Tests for the python -m rpcgen entry point."""

import pytest

import rpcgen.codegen
import rpcgen.loader
from rpcgen.__main__ import main
from rpcgen.codegen import HANDLER_MAP_FILENAME, HANDLERS_FILENAME


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    out = tmp_path / "generated"
    monkeypatch.setattr(rpcgen.codegen, "OUTPUT_DIR", out)
    return out


class TestMain:
    """End-to-end runs with patched input and output locations."""

    def test_success(self, handler_files, output_dir, monkeypatch, capsys):
        monkeypatch.setattr(rpcgen.loader, "HANDLER_FILES", handler_files)
        assert main() == 0

        handlers_source = (output_dir / HANDLERS_FILENAME).read_text()
        assert "async handleGetVersion(port: number" in handlers_source
        assert "async handleGetRootWidget(port: number" in handlers_source
        assert handlers_source.index("handleGetVersion") < handlers_source.index("handleGetRootWidget")
        assert '"get_root_widget": (request: any)' in (output_dir / HANDLER_MAP_FILENAME).read_text()

        out = capsys.readouterr().out
        assert "Generated FlutterRpcHandlers class at:" in out
        assert "Generated createRpcHandlerMap function at:" in out

    def test_missing_file_writes_nothing(self, handler_files, output_dir, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(rpcgen.loader, "HANDLER_FILES", (handler_files[0], tmp_path / "missing.yaml"))
        assert main() == 1
        assert not output_dir.exists()
        assert "Error generating RPC handlers: Handler file not found" in capsys.readouterr().err

    def test_bad_rule_leaves_existing_output(self, write_handlers, vm_entry, output_dir, monkeypatch, capsys):
        output_dir.mkdir()
        existing = output_dir / HANDLERS_FILENAME
        existing.write_text("previous\n")
        bad = write_handlers("ext.dart.handler.yaml", [dict(vm_entry, parameters={"isolateId": "isolate"})])
        monkeypatch.setattr(rpcgen.loader, "HANDLER_FILES", (bad,))

        assert main() == 1
        assert existing.read_text() == "previous\n"
        assert not (output_dir / HANDLER_MAP_FILENAME).exists()
        assert "unrecognized mapping rule 'isolate'" in capsys.readouterr().err

    def test_invalid_utf8_reported(self, tmp_path, output_dir, monkeypatch, capsys):
        bad = tmp_path / "ext.dart.handler.yaml"
        bad.write_bytes(b"handlers:\n  - name: get_vm\n    description: \xff\xfe\n")
        monkeypatch.setattr(rpcgen.loader, "HANDLER_FILES", (bad,))
        assert main() == 1
        assert not output_dir.exists()
        assert "is not valid UTF-8" in capsys.readouterr().err

    def test_real_handler_files(self, output_dir):
        assert main() == 0
        assert (output_dir / HANDLERS_FILENAME).is_file()
        assert (output_dir / HANDLER_MAP_FILENAME).is_file()
