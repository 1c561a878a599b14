from genome_matcher.main import main, parse_args


def run(argv):
    return main(["--log-dir", "", "--no-progress", "--log-level", "WARNING"] + argv)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.library == []
    assert not args.snp
    assert args.threshold == 0.0
    assert args.fragment_length is None


def test_find_exact(genome_file, capsys):
    assert run(["--min-search-length", "3", "--library", str(genome_file), "--find", "ACGT"]) == 0
    out = capsys.readouterr().out
    assert "2 matches of ACGT found:" in out
    assert "  length 4 position 0 in G1" in out
    assert "  length 4 position 2 in G2" in out


def test_find_snp_no_match(genome_file, capsys):
    assert run(["--min-search-length", "3", "--library", str(genome_file),
                "--find", "GGGGGG", "--snp"]) == 0
    assert "No matches or SNiPs of GGGGGG were found." in capsys.readouterr().out


def test_related_sequence(genome_file, capsys):
    assert run(["--min-search-length", "3", "--library", str(genome_file),
                "--sequence", "ACGTACGT", "--fragment-length", "4", "--threshold", "50"]) == 0
    out = capsys.readouterr().out
    assert "  For sequence" in out
    assert "2 related genomes were found:" in out


def test_related_file_with_summary(genome_file, capsys):
    assert run(["--min-search-length", "3", "--library", str(genome_file),
                "--related", str(genome_file), "--summary"]) == 0
    out = capsys.readouterr().out
    assert "LIBRARY SUMMARY" in out
    assert "  For G1" in out
    assert "  For G2" in out


def test_invalid_min_search_length(capsys):
    assert run(["--min-search-length", "2"]) == 1
    assert "Error: Minimum search length 2" in capsys.readouterr().out


def test_fragment_too_short(genome_file, capsys):
    assert run(["--min-search-length", "3", "--library", str(genome_file), "--find", "AC"]) == 1
    assert "Recommended next step" in capsys.readouterr().out


def test_missing_library_file(tmp_path, capsys):
    assert run(["--library", str(tmp_path / "nope.txt")]) == 1
    assert "Cannot open file" in capsys.readouterr().out


def test_log_files_are_written(genome_file, tmp_path):
    log_dir = tmp_path / "logs"
    assert main(["--log-dir", str(log_dir), "--no-progress", "--min-search-length", "3",
                 "--library", str(genome_file)]) == 0
    assert (log_dir / "genome_matcher.log").exists()
    assert (log_dir / "error.log").exists()


def test_related_file_short_genome_does_not_stop_later_queries(genome_file, tmp_path, capsys):
    query_file = tmp_path / "queries.txt"
    query_file.write_text(">S\nAC\n>L\nACGTACGT\n")
    assert run(["--min-search-length", "3", "--library", str(genome_file),
                "--related", str(query_file), "--fragment-length", "4"]) == 0
    out = capsys.readouterr().out
    assert "  For S\n    No related genomes were found" in out
    assert "  For L\n    2 related genomes were found:" in out
