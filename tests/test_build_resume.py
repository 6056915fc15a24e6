import importlib.util
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_model.schema import resume_from_json

CLI_PATH = PROJECT_ROOT / "examples" / "build_resume.py"
spec = importlib.util.spec_from_file_location("build_resume", CLI_PATH)
build_resume = importlib.util.module_from_spec(spec)
assert spec.loader is not None
spec.loader.exec_module(build_resume)
main = build_resume.main


def test_cli_prints_and_saves_resume(tmp_path, capsys):
    output = tmp_path / "resume.json"
    main(
        [
            "Ada Lovelace",
            "--location",
            "London",
            "--contact",
            "email=ada@example.com",
            "--objective",
            "Poetical science",
            "--achievement",
            "Note G",
            "--output",
            str(output),
        ]
    )

    printed = json.loads(capsys.readouterr().out)
    assert printed["full_name"] == "Ada Lovelace"
    assert printed["contacts"] == {"EMAIL": "ada@example.com"}
    assert printed["sections"]["ACHIEVEMENT"]["items"] == ["Note G"]

    resume = resume_from_json(output.read_text())
    assert resume.get_location() == "London"
    assert resume.get_id() == printed["id"]
