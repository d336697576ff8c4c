"""In-memory shared data store for the in-memory repositories."""

import threading
from dataclasses import dataclass, field

from clinicflow.domain.aggregates import Clinic, Patient, Sample


@dataclass(slots=True)
class InMemoryStore:
    """Shared in-memory backing store for the in-memory repositories.

    A single instance is handed to all three repositories (through the unit of
    work) so that use cases spanning several aggregates see the same data.

    Each mapping is keyed by aggregate id. Dicts keep insertion order, which
    is the order list queries return. Replacing an entry in place keeps its
    position.

    `lock` serializes every repository call. Sequences of calls are not
    atomic.
    """

    # keyed by clinic id
    clinics: dict[str, Clinic] = field(default_factory=dict)

    # keyed by patient id
    patients: dict[str, Patient] = field(default_factory=dict)

    # keyed by sample id
    samples: dict[str, Sample] = field(default_factory=dict)

    lock: threading.Lock = field(default_factory=threading.Lock)
