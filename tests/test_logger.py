"""
Structured logger: JSON lines file output and operation context.
Run with:  python -m pytest tests/ -v
"""

import json

from shared.logger import CaesarLabLogger


def test_json_log_file(tmp_path):
    log_file = tmp_path / "logs" / "caesar.log"
    log = CaesarLabLogger(
        "caesar.test",
        log_level="DEBUG",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    with log.operation("encrypt"):
        log.info("Encrypted %d characters", 5, shift=3)
    log.warning("outside")
    for handler in log.underlying.handlers:
        handler.close()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["message"] == "Encrypted 5 characters"
    assert lines[0]["operation"] == "encrypt"
    assert lines[0]["tool_name"] == "caesar.test"
    assert lines[0]["extra"] == {"shift": 3}
    assert lines[0]["logger"] == "caesarlab.caesar.test"
    assert "operation" not in lines[1]


def test_reinstantiation_does_not_stack_handlers():
    CaesarLabLogger("caesar.stack", console_output=True)
    log = CaesarLabLogger("caesar.stack", console_output=True)
    assert len(log.underlying.handlers) == 1
    assert log.tool_name == "caesar.stack"


def test_reinstantiation_closes_previous_file_handler(tmp_path):
    log_file = tmp_path / "engine.log"
    first = CaesarLabLogger("caesar.reopen", log_file=log_file, console_output=False)
    old_handler = first.underlying.handlers[0]
    second = CaesarLabLogger("caesar.reopen", log_file=log_file, console_output=False)
    assert old_handler.stream is None
    assert len(second.underlying.handlers) == 1
    for handler in second.underlying.handlers:
        handler.close()
