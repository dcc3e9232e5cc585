import json
import socket
from io import StringIO

import pytest

from nlisp import repl
from nlisp.interpreter import Interpreter
from nlisp.repl_server import ReplServer, handle_request


def _session(lines: str, prompt: str = "user> ") -> str:
    out = StringIO()
    repl.run_repl(Interpreter(), prompt, stdin=StringIO(lines), stdout=out)
    return out.getvalue()


def test_repl_prints_results_and_prompts():
    assert _session("(+ 1 2)\n") == "user> 3\nuser> \n"


def test_repl_recovers_from_errors():
    out = _session("(def! x 1)\n(missing)\n(+ x 1)\n")
    assert out == (
        "user> 1\n"
        "user> error: attempted to access an unbound symbol: `missing`\n"
        "user> 2\n"
        "user> \n"
    )


def test_repl_reports_parse_errors():
    out = _session("(+ 1\n")
    assert "error: parse error: `parentheses were unbalanced in expression`" in out


def test_repl_skips_blank_lines():
    assert _session("\n   \n42\n") == "user> user> user> 42\nuser> \n"


def test_repl_several_forms_on_one_line():
    assert _session("1 2\n") == "user> 1\n2\nuser> \n"


def test_repl_keeps_bindings_made_before_an_error():
    out = _session("(def! a 1) (missing)\na\n")
    assert out.endswith("user> 1\nuser> \n")


def test_repl_survives_deep_recursion():
    out = _session("(def! loop (fn* (n) (loop n)))\n(loop 1)\n(+ 1 1)\n")
    assert "error: maximum recursion depth exceeded" in out
    assert out.endswith("user> 2\nuser> \n")


def test_repl_custom_prompt():
    assert _session("1\n", prompt="> ") == "> 1\n> \n"


def test_run_script(tmp_path):
    script = tmp_path / "prog.nl"
    script.write_text("(def! sq (fn* (x) (* x x)))\n(sq 9)\n", encoding="utf-8")
    out = StringIO()
    assert repl.run_script(Interpreter(), script, stdout=out) == 0
    assert out.getvalue() == "(fn ...)\n81\n"


def test_run_script_error(tmp_path):
    script = tmp_path / "bad.nl"
    script.write_text("(/ 1 0)\n", encoding="utf-8")
    out = StringIO()
    assert repl.run_script(Interpreter(), script, stdout=out) == 1
    assert out.getvalue() == "error: attempted to divide by zero\n"


def test_run_script_missing_file(tmp_path):
    out = StringIO()
    assert repl.run_script(Interpreter(), tmp_path / "nope.nl", stdout=out) == 1
    assert out.getvalue().startswith("error: cannot read")


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "prog.nl"
    script.write_text('(prn "side effect")\n(+ 2 3)\n', encoding="utf-8")
    assert repl.main([str(script)]) == 0
    assert capsys.readouterr().out == '"side effect"\nnil\n5\n'


def test_main_with_prelude(tmp_path, capsys):
    prelude = tmp_path / "prelude.nl"
    prelude.write_text("(def! base 100)\n", encoding="utf-8")
    script = tmp_path / "prog.nl"
    script.write_text("(+ base 1)\n", encoding="utf-8")
    assert repl.main(["--prelude", str(prelude), str(script)]) == 0
    assert capsys.readouterr().out == "101\n"


def test_main_bad_prelude(tmp_path, capsys):
    assert repl.main(["--prelude", str(tmp_path / "missing.nl"), "unused.nl"]) == 1
    assert "failed to load prelude" in capsys.readouterr().out


def test_main_interactive_uses_env_prompt(monkeypatch, capsys):
    monkeypatch.setenv("NLISP_PROMPT", "nl> ")
    monkeypatch.setattr("sys.stdin", StringIO("(* 6 7)\n"))
    assert repl.main([]) == 0
    assert capsys.readouterr().out == "nl> 42\nnl> \n"


def test_arg_parser():
    args = repl.create_arg_parser().parse_args(["-i", "--log-level", "DEBUG", "x.nl"])
    assert args.interactive is True
    assert args.log_level == "DEBUG"
    assert args.script == "x.nl"


# -------------------------------
# REPL server protocol
# -------------------------------

@pytest.fixture
def interp():
    return Interpreter()


def test_server_eval(interp):
    resp = handle_request(interp, json.dumps({"cmd": "eval", "code": "(+ 1 2)"}))
    assert resp == {"ok": True, "result": "3\n"}


def test_server_state_persists_between_requests(interp):
    handle_request(interp, b'{"cmd": "eval", "code": "(def! x 5)"}')
    resp = handle_request(interp, b'{"cmd": "eval", "code": "(* x 2)"}')
    assert resp == {"ok": True, "result": "10\n"}


def test_server_reports_lisp_errors(interp):
    resp = handle_request(interp, json.dumps({"cmd": "eval", "code": "(missing)"}))
    assert resp["ok"] is False
    assert "missing" in resp["error"]


@pytest.mark.parametrize(
    "line",
    [
        b"not json",
        b"[1, 2]",
        b'{"cmd": "shutdown"}',
        b'{"cmd": "eval", "code": 5}',
        b"\xff\xfe",
    ],
)
def test_server_rejects_bad_requests(interp, line):
    resp = handle_request(interp, line)
    assert resp["ok"] is False
    assert resp["error"]


def _exchange(server: ReplServer, *lines: bytes) -> list[dict]:
    """Feed request lines to one client connection and collect every reply."""
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"".join(lines))
        client_side.shutdown(socket.SHUT_WR)
        server._handle_client(server_side, "socketpair")
        with client_side.makefile("rb") as replies:
            return [json.loads(reply) for reply in replies]


def test_server_connection_answers_each_line():
    server = ReplServer()
    replies = _exchange(
        server,
        b'{"cmd": "eval", "code": "(def! x 2) (+ x 1)"}\n',
        b"\n",
        b'{"cmd": "nope"}\n',
    )
    assert replies == [
        {"ok": True, "result": "2\n3\n"},
        {"ok": False, "error": "Unknown cmd: nope"},
    ]


def test_server_session_outlives_a_connection():
    server = ReplServer()
    _exchange(server, b'{"cmd": "eval", "code": "(def! counter (atom 0))"}\n')
    replies = _exchange(
        server,
        b'{"cmd": "eval", "code": "(swap! counter + 1)"}\n',
        b'{"cmd": "eval", "code": "(swap! counter + 1)"}\n',
    )
    assert replies == [{"ok": True, "result": "1\n"}, {"ok": True, "result": "2\n"}]
    assert server.interp.eval("(deref counter)") == 2


def test_server_connection_reports_errors_and_continues():
    server = ReplServer()
    replies = _exchange(
        server,
        b'{"cmd": "eval", "code": "(/ 1 0)"}\n',
        b'{"cmd": "eval", "code": "(+ 1 1)"}\n',
    )
    assert replies == [
        {"ok": False, "error": "attempted to divide by zero"},
        {"ok": True, "result": "2\n"},
    ]
