from dataclasses import dataclass


@dataclass(frozen=True)
class IKConfig:
    """Numeric tolerances for the analytical IK solver."""

    domain_tolerance: float = 1e-6  # Allowed overshoot of the elbow cosine past +/-1
    zero_threshold: float = 1e-6  # Projected rotation entries below this become 0

    def __post_init__(self):
        if self.domain_tolerance <= 0:
            raise ValueError("domain_tolerance must be > 0")
        if self.zero_threshold <= 0:
            raise ValueError("zero_threshold must be > 0")
