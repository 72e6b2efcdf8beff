"""Tests for chunkhunter/pipeline.py: whole hunts over a workspace."""
from __future__ import annotations

import logging
import os
import zipfile

import pytest

from chunkhunter.errors import DictionaryError, InputError
from chunkhunter.pipeline import ChunkHunt, HuntConfig


class TestHunt:
    def test_end_to_end(self, config, write_doc):
        doc = write_doc(config.input_dir, "a.txt", "Good Morning, good morning! Hello")
        outcomes = ChunkHunt(config).execute()

        assert len(outcomes) == 1
        assert outcomes[0].written is True

        out = config.output_dir
        html = (out / "result_a-txt.html").read_text(encoding="utf-8")
        assert html.count("<span") == 2
        assert "> Good Morning</span>" in html
        assert "> good morning</span>" in html

        assert (out / "stats_a-txt.csv").read_text(encoding="utf-8") == (
            "chunk,length,frequency\ngood morning,13,2\n"
        )

        stats = (out / "stats_a-txt.txt").read_text(encoding="utf-8")
        assert f"Chunk Hunter statistics for {os.path.join(str(config.input_dir), 'a.txt')}" in stats
        assert str(doc) in stats
        assert "Frequency: 4 chunkwords / 5 words = 80.00%" in stats
        assert "Text checked against 3 registered combinations" in stats

    def test_undecodable_bytes_survive_in_html(self, config, caplog):
        (config.input_dir / "a.txt").write_bytes(b"Caf\xe9 good morning")
        with caplog.at_level(logging.INFO):
            outcomes = ChunkHunt(config).execute()

        assert outcomes[0].report.records[0].frequency == 1
        html = (config.output_dir / "result_a-txt.html").read_bytes()
        assert html == (
            b' Caf\xe9<span style="background-color: #FFFF00"> good morning</span>'
        )
        assert f"checking against 3 chunks from {config.chunks_file}" in caplog.text

    def test_documents_in_subfolders(self, config, write_doc):
        write_doc(config.input_dir, "a.txt", "by the way")
        write_doc(config.input_dir, "sub/b.txt", "nothing here")
        outcomes = ChunkHunt(config).execute()
        assert [o.report.stats.chunkwords for o in outcomes] == [3, 0]
        assert (config.output_dir / "stats_b-txt.csv").read_text(encoding="utf-8") == (
            "chunk,length,frequency\n"
        )

    def test_empty_document_reports_zero(self, config, write_doc):
        write_doc(config.input_dir, "empty.txt", "")
        outcomes = ChunkHunt(config).execute()
        assert outcomes[0].written is True
        stats = (config.output_dir / "stats_empty-txt.txt").read_text(encoding="utf-8")
        assert "Frequency: 0 chunkwords / 0 words = 0.00%" in stats

    def test_write_failure_moves_to_next_document(self, config, write_doc):
        write_doc(config.input_dir, "a.txt", "good morning")
        write_doc(config.input_dir, "b.txt", "good morning")
        (config.output_dir / "result_a-txt.html").mkdir(parents=True)

        outcomes = ChunkHunt(config).execute()
        assert [o.written for o in outcomes] == [False, True]
        assert not (config.output_dir / "stats_a-txt.csv").exists()
        assert (config.output_dir / "stats_b-txt.txt").exists()

    def test_zip_input(self, config, tmp_path):
        archive = tmp_path / "docs.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("letters/a.txt", "Was always, was always.")
        zip_config = HuntConfig(
            input_dir=archive,
            chunks_file=config.chunks_file,
            output_dir=config.output_dir,
        )
        outcomes = ChunkHunt(zip_config).execute()
        assert outcomes[0].report.records[0].frequency == 2
        assert (config.output_dir / "result_a-txt.html").exists()


class TestStartupFailures:
    def test_no_txt_files(self, config, write_doc):
        write_doc(config.input_dir, "notes.md", "good morning")
        write_doc(config.input_dir, "report.docx", "good morning")
        with pytest.raises(InputError, match="No files found"):
            ChunkHunt(config).prepare()
        assert not config.output_dir.exists()

    def test_missing_input(self, config):
        config.input_dir.rmdir()
        with pytest.raises(InputError):
            ChunkHunt(config).prepare()
        assert not config.output_dir.exists()

    def test_missing_dictionary(self, config, write_doc):
        write_doc(config.input_dir, "a.txt", "good morning")
        config.chunks_file.unlink()
        with pytest.raises(DictionaryError):
            ChunkHunt(config).execute()
        assert not config.output_dir.exists()

    def test_prepare_writes_nothing(self, config, write_doc):
        write_doc(config.input_dir, "a.txt", "good morning")
        hunt = ChunkHunt(config)
        hunt.prepare()
        assert len(hunt.dictionary) == 3
        assert len(hunt.documents) == 1
        assert not config.output_dir.exists()
