from __future__ import annotations

"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.
"""
import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import xor_bits

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Samples a register of simulated qubits, one bit per qubit per run.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        if self.config.num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")

        # Local simulator backend.
        self.backend = AerSimulator()

        # Ensure requested num_qubits does not exceed backend capability.
        backend_cfg = (
            self.backend.configuration()
            if hasattr(self.backend, "configuration")
            else None
        )
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)

        # 1) Put all qubits into superposition with H gate.
        for i in range(n):
            qc.h(i)

        # 2) Even indices measure in Z directly; odd indices get a second
        #    H first, which measures them in the X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def sample(self) -> List[int]:
        """
        Run the circuit once (single shot) and return the measured bits,
        index 0 being the first qubit.
        """
        qc, _basis = self.build_circuit()
        tqc = transpile(qc, self.backend)
        counts = self.backend.run(tqc, shots=1).result().get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]
        return [int(b) for b in bitstring[::-1]]

    def sample_streams(self) -> List[int]:
        """
        Run `quantum_streams` independent shots and XOR them into one
        bit list.
        """
        streams = max(1, self.config.quantum_streams)
        combined = self.sample()
        for _ in range(streams - 1):
            combined = xor_bits(combined, self.sample())

        logger.debug(
            "Sampled %d qubits across %d stream(s)", len(combined), streams
        )
        return combined
