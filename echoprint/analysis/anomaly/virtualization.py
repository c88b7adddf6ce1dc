"""Virtual-machine signatures: virtual GPUs and minimal CPU/RAM."""

from __future__ import annotations

from echoprint.analysis import signal_patterns
from echoprint.analysis.anomaly import base
from echoprint.models import signals


def detect_vm_gpu(bundle: signals.SignalBundle) -> base.Detection:
    renderer = bundle.webgl.renderer.lower()
    return base.Detection.from_evidence(
        [
            f'GPU renderer contains "{keyword}" ({label})'
            for keyword, label in signal_patterns.VM_RENDERER_SIGNATURES
            if keyword in renderer
        ]
    )


def detect_vm_cpu(bundle: signals.SignalBundle) -> base.Detection:
    evidence = []
    if bundle.hardware.cpu_cores == 1:
        evidence.append("Only 1 CPU core - typical of a minimal VM")
    return base.Detection.from_evidence(evidence)


def detect_vm_memory(bundle: signals.SignalBundle) -> base.Detection:
    memory = bundle.hardware.memory
    evidence = []
    if memory is not None and memory <= 2:
        evidence.append(f"Only {memory:g} GB RAM - typical of a minimal VM")
    return base.Detection.from_evidence(evidence)


INDICATORS: tuple[base.AnomalyIndicator, ...] = (
    base.AnomalyIndicator(
        id="vm_gpu",
        name="Virtual GPU",
        description="The GPU points to a virtual machine",
        type="virtualization",
        severity="high",
        detect=detect_vm_gpu,
    ),
    base.AnomalyIndicator(
        id="vm_cpu_cores",
        name="Suspicious CPU cores",
        description="The core count is typical of a VM",
        type="virtualization",
        severity="low",
        detect=detect_vm_cpu,
    ),
    base.AnomalyIndicator(
        id="vm_memory",
        name="Suspicious memory size",
        description="The memory size is typical of a VM",
        type="virtualization",
        severity="low",
        detect=detect_vm_memory,
    ),
)
