import pytest

from genome_matcher import ConfigurationError, Genome, GenomeMatch, GenomeMatcher, InvalidInputError


@pytest.fixture
def related_library():
    library = GenomeMatcher(3)
    library.add_genome(Genome("A", "ACGTACGTACGT"))
    library.add_genome(Genome("B", "TTTTTTTTTTTT"))
    library.add_genome(Genome("C", "ACGTTTTTGGGG"))
    return library


def test_example_both_genomes_related(small_library):
    results = small_library.find_related_genomes(Genome("Q", "ACGTACGT"), 4, True, 50)
    assert results == [GenomeMatch("G1", 100.0), GenomeMatch("G2", 100.0)]


def test_ranked_by_percent_then_name(related_library):
    results = related_library.find_related_genomes(Genome("Q", "ACGTTTTT"), 4, True, 0)
    assert results == [GenomeMatch("C", 100.0), GenomeMatch("A", 50.0), GenomeMatch("B", 50.0)]


def test_threshold_filters(related_library):
    query = Genome("Q", "ACGTTTTT")
    assert related_library.find_related_genomes(query, 4, True, 60) == [GenomeMatch("C", 100.0)]
    assert related_library.find_related_genomes(query, 4, True, 100) == [GenomeMatch("C", 100.0)]
    assert len(related_library.find_related_genomes(query, 4, True, 50)) == 3


def test_zero_threshold_omits_genomes_without_matches(related_library):
    results = related_library.find_related_genomes(Genome("Q", "ACGTACGT"), 4, True, 0)
    assert results == [GenomeMatch("A", 100.0), GenomeMatch("C", 100.0)]


def test_raising_threshold_never_adds_results(related_library):
    query = Genome("Q", "ACGTTTTTGGGGACGA")
    previous = None
    for threshold in range(0, 101, 5):
        count = len(related_library.find_related_genomes(query, 4, False, threshold))
        if previous is not None:
            assert count <= previous
        previous = count


def test_snp_fragments(related_library):
    query = Genome("Q", "ACGA")
    assert related_library.find_related_genomes(query, 4, True, 0) == []
    assert related_library.find_related_genomes(query, 4, False, 0) == [GenomeMatch("A", 100.0),
                                                                      GenomeMatch("C", 100.0)]


def test_trailing_partial_fragment_is_ignored(related_library):
    # 'ACGT' + 'TT': only one full fragment
    results = related_library.find_related_genomes(Genome("Q", "ACGTTT"), 4, True, 0)
    assert results == [GenomeMatch("A", 100.0), GenomeMatch("C", 100.0)]


def test_query_shorter_than_fragment(related_library):
    assert related_library.find_related_genomes(Genome("Q", "ACG"), 4, True, 0) == []


def test_plain_sequence_query(related_library):
    assert related_library.find_related_genomes("tttttttt", 4, True, 100) == [GenomeMatch("B", 100.0),
                                                                            GenomeMatch("C", 100.0)]


@pytest.mark.parametrize("threshold", [-1, 100.5, 250])
def test_threshold_out_of_range(related_library, threshold):
    with pytest.raises(InvalidInputError):
        related_library.find_related_genomes(Genome("Q", "ACGTTTTT"), 4, True, threshold)


def test_fragment_length_below_prefix_length(related_library):
    with pytest.raises(ConfigurationError):
        related_library.find_related_genomes(Genome("Q", "ACGTTTTT"), 2, True, 0)


def test_percentages_are_fractional():
    library = GenomeMatcher(3)
    library.add_genome(Genome("A", "AAAACCCC"))
    results = library.find_related_genomes(Genome("Q", "AAAGGGTTT"), 3, True, 0)
    assert len(results) == 1
    assert results[0].genome_name == "A"
    assert results[0].percent_match == pytest.approx(100.0 / 3)
