"""Built-in study sets."""

from typing import Optional, Tuple

from ..models import DatasetDescriptor

DATASETS: Tuple[DatasetDescriptor, ...] = (
    DatasetDescriptor(
        id="all",
        display_name="All words",
        sources=("english_words.json",),
    ),
    DatasetDescriptor(
        id="combined",
        display_name="All units together (Unit 1 + Unit 2)",
        sources=("unit1.json", "unit2.json"),
    ),
    DatasetDescriptor(
        id="unit1",
        display_name="Unit 1",
        sources=("unit1.json",),
    ),
    DatasetDescriptor(
        id="unit2",
        display_name="Unit 2",
        sources=("unit2.json",),
    ),
)


def get_dataset(dataset_id: Optional[str]) -> Optional[DatasetDescriptor]:
    """Return the descriptor with the given id, or None."""
    if not dataset_id:
        return None
    for descriptor in DATASETS:
        if descriptor.id == dataset_id:
            return descriptor
    return None


def find_dataset(dataset_id: Optional[str]) -> DatasetDescriptor:
    """Return the descriptor with the given id, falling back to the first one."""
    return get_dataset(dataset_id) or DATASETS[0]


def get_dataset_ids() -> list:
    """List the ids of all built-in datasets."""
    return [d.id for d in DATASETS]
