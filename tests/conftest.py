import logging

import pytest

from genome_matcher import Genome, GenomeMatcher
from genome_matcher import utils

GENOME_1 = "CGGTGTACNACGACTGGGGATAGAATATCTTGACGTCGTACCGGTTGTAGTCGTTCGACCGAAGGGTTCCGCGCCAGTAC"
GENOME_2 = "TAACAGAGCGGTNATATTGTTACGAATCACGTGCGAGACTTAGAGCCAGAATATGAAGTAGTGATTCAGCAACCAAGCGG"
GENOME_3 = "TTTTGAGCCAGCGACGCGGCTTGCTTAACGAAGCGGAAGAGTAGGTTGGACACATTNGGCGGCACAGCGCTTTTGAGCCA"


@pytest.fixture
def small_library():
    library = GenomeMatcher(3)
    library.add_genome(Genome("G1", "ACGTACGT"))
    library.add_genome(Genome("G2", "TTACGTTT"))
    return library


@pytest.fixture
def three_genome_library():
    library = GenomeMatcher(4)
    library.add_genome(Genome("Genome 1", GENOME_1))
    library.add_genome(Genome("Genome 2", GENOME_2))
    library.add_genome(Genome("Genome 3", GENOME_3))
    return library


@pytest.fixture
def genome_file(tmp_path):
    path = tmp_path / "library.txt"
    path.write_text(">G1\nACGT\nacgt\n>G2\nTTACGTTT\n")
    return path


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    yield
    root_logger = logging.getLogger()
    while utils._installed_handlers:
        handler = utils._installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
