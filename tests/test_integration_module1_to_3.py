"""
Integration Test: Modules 1-3

Full pipeline on random data:
    source bits -> encode -> inject errors -> syndrome -> position -> correct

Single errors must always be repaired. Two or three errors make the
syndrome point somewhere else; the rates below are a demonstration of that
breakdown, measured over seeded trials.
"""

import numpy as np
import pytest

from src.module1_hamming_codec import (
    encode,
    syndrome,
    position_from_syndrome,
    correct_bit,
    extract_data,
    compute_ber,
)
from src.module2_error_injection import ErrorMode, NumpyRandomSource, apply_errors, inject_manual
from src.module3_simulation import TransmissionSession, CorrectionStatus


def random_data(rng, max_length=30):
    length = int(rng.integers(2, max_length + 1))
    return "".join(map(str, rng.integers(0, 2, size=length)))


class TestPipeline:
    """End-to-end encode -> inject -> correct."""

    def test_single_error_always_recovered(self):
        data_rng = np.random.default_rng(2024)
        source = NumpyRandomSource(2024)

        for _ in range(300):
            data = random_data(data_rng)
            codeword = encode(data)

            result = apply_errors(codeword, ErrorMode.SINGLE, source)
            position = position_from_syndrome(syndrome(result.received))
            corrected = correct_bit(result.received, position)

            assert position == result.positions[0]
            assert np.array_equal(corrected, codeword)
            assert extract_data(corrected) == data

    @pytest.mark.parametrize("mode", [ErrorMode.DOUBLE, ErrorMode.TRIPLE])
    def test_multiple_errors_mislocated(self, mode):
        """The claimed position never matches the ground truth."""
        data_rng = np.random.default_rng(7)
        source = NumpyRandomSource(7)
        trials = 300
        mislocated = 0

        for _ in range(trials):
            codeword = encode(random_data(data_rng))
            result = apply_errors(codeword, mode, source)
            position = position_from_syndrome(syndrome(result.received))
            corrected = correct_bit(result.received, position)

            if position not in result.positions:
                mislocated += 1
            assert not np.array_equal(corrected, codeword)
            assert compute_ber(codeword, corrected) > 0

        assert mislocated / trials > 0.9

    def test_manual_flip_every_position(self):
        codeword = encode("11010011")
        for p in range(1, len(codeword) + 1):
            received = inject_manual(codeword, p)
            assert position_from_syndrome(syndrome(received)) == p
        assert codeword.tolist() == encode("11010011").tolist()

    def test_session_statistics(self):
        """Counts outcomes per mode over many session runs."""
        session = TransmissionSession(rng=5)
        session.encode("1101001")
        counts = {}

        for mode in ErrorMode:
            statuses = []
            for _ in range(100):
                session.simulate_error(mode)
                statuses.append(session.correct().status)
            counts[mode] = statuses

        assert set(counts[ErrorMode.SINGLE]) == {CorrectionStatus.CORRECTED}
        assert set(counts[ErrorMode.DOUBLE]) == {CorrectionStatus.MISCORRECTED}
        assert CorrectionStatus.CORRECTED not in counts[ErrorMode.TRIPLE]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
