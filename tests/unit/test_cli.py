# =============================================================================
# TESTS - Command Line
# =============================================================================

import json


class TestCli:
    """Tests for the argparse entry point."""

    def test_init_sample(self, assets_dir, capsys):
        from examprep.cli import main

        assert main(["--assets-dir", str(assets_dir), "--init-sample"]) == 0

        out = capsys.readouterr().out
        assert f"Created the {assets_dir} directory" in out
        data = json.loads((assets_dir / "sample_exam.json").read_text(encoding="utf-8"))
        assert data["name"] == "Sample Exam"
        assert len(data["questions"]) == 3

    def test_list(self, exam_file, capsys):
        from examprep.cli import main

        assert main(["--assets-dir", str(exam_file.parent), "--list"]) == 0

        assert "sample.json" in capsys.readouterr().out.splitlines()

    def test_list_empty(self, assets_dir, capsys):
        from examprep.cli import main

        assert main(["--assets-dir", str(assets_dir), "--list"]) == 0

        assert "No exam files found" in capsys.readouterr().out

    def test_run_exam(self, exam_file, monkeypatch, capsys):
        from examprep.cli import main

        answers = iter(["B", "A B E", "grep -i john user_info.txt"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--assets-dir", str(exam_file.parent), "--exam", "sample.json"]) == 0

        assert "Score: 3/3 (100.0%) - Excellent" in capsys.readouterr().out

    def test_prompts_for_exam(self, exam_file, monkeypatch, capsys):
        from examprep.cli import main

        answers = iter(["sample.json", "sample.json", "A", "A", "nope"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--assets-dir", str(exam_file.parent)]) == 0

        assert "Score: 0/3 (0.0%) - Needs review" in capsys.readouterr().out

    def test_missing_exam(self, assets_dir, capsys):
        from examprep.cli import main

        assert main(["--assets-dir", str(assets_dir), "--exam", "missing.json"]) == 1

        assert "Error: Unable to open exam file" in capsys.readouterr().err

    def test_invalid_exam(self, assets_dir, single_choice_record, capsys):
        from examprep.cli import main

        single_choice_record["answer"] = ["Rome", "Paris"]
        assets_dir.mkdir()
        (assets_dir / "bad.json").write_text(
            json.dumps({"name": "Bad", "questions": [single_choice_record]})
        )

        assert main(["--assets-dir", str(assets_dir), "--exam", "bad.json"]) == 1

        assert "exactly one answer" in capsys.readouterr().err

    def test_bad_env_config(self, assets_dir, monkeypatch, capsys):
        from examprep.cli import main

        monkeypatch.setenv("EXAMPREP_SHOW_EXPLANATION", "sometimes")

        assert main(["--assets-dir", str(assets_dir), "--list"]) == 1

        assert "Unknown explanation mode" in capsys.readouterr().err

    def test_eof_exits_130(self, exam_file, monkeypatch):
        from examprep.cli import main

        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)

        assert main(["--assets-dir", str(exam_file.parent), "--exam", "sample.json"]) == 130
