"""
Integration tests for the cmonkey-motif command line.
"""

import json
import subprocess
import sys

import pandas as pd


def run_cli(cmd: list[str]) -> subprocess.CompletedProcess:
    """Run CLI through current Python env to avoid global PATH contamination."""
    args = cmd[1:] if cmd and cmd[0] == "cmonkey-motif" else cmd
    return subprocess.run([sys.executable, "-m", "cmonkey.cli", *args], capture_output=True, text=True)


def test_show(motifs_path):
    result = run_cli(["cmonkey-motif", "show", str(motifs_path)])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    lines = [json.loads(line) for line in result.stdout.splitlines()]
    assert [line["id"] for line in lines] == ["M1", "M2"]
    assert lines[0]["length"] == 3
    assert lines[0]["hits"] == 2
    assert lines[1]["sites"] == 0


def test_meme(motifs_path, temp_dir):
    output = temp_dir / "out.meme"
    result = run_cli(["cmonkey-motif", "-v", "meme", str(motifs_path), "-o", str(output)])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"
    assert output.exists()
    assert "MOTIF M1" in output.read_text()


def test_meme_custom_background(motifs_path, temp_dir):
    output = temp_dir / "out.meme"
    cmd = ["cmonkey-motif", "meme", str(motifs_path), "-o", str(output), "--background", "0.3", "0.2", "0.2", "0.3"]
    result = run_cli(cmd)
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"
    assert "A 0.3 C 0.2 G 0.2 T 0.3" in output.read_text()


def test_hits_to_file(motifs_path, temp_dir):
    output = temp_dir / "hits.tsv"
    result = run_cli(["cmonkey-motif", "hits", str(motifs_path), "-o", str(output)])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    table = pd.read_csv(output, sep="\t")
    assert list(table.columns)[:2] == ["motif_id", "seq_id"]
    assert list(table["seq_id"]) == ["VNG0001", "VNG0002"]


def test_hits_to_stdout(motifs_path):
    result = run_cli(["cmonkey-motif", "hits", str(motifs_path)])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"
    assert result.stdout.splitlines()[0].startswith("motif_id\tseq_id\tstrand")


def test_missing_file(temp_dir):
    result = run_cli(["cmonkey-motif", "show", str(temp_dir / "missing.json")])
    assert result.returncode == 1
    assert "ERROR" in result.stdout


def test_malformed_motif(temp_dir):
    path = temp_dir / "bad.json"
    path.write_text('{"pssm_id": "seven"}')
    result = run_cli(["cmonkey-motif", "show", str(path)])
    assert result.returncode == 1
    assert "pssm_id" in result.stdout


def test_no_arguments():
    result = run_cli(["cmonkey-motif"])
    assert result.returncode == 1


def test_unknown_mode(motifs_path):
    result = run_cli(["cmonkey-motif", "convert", str(motifs_path)])
    assert result.returncode == 2
    assert "invalid choice" in result.stderr
