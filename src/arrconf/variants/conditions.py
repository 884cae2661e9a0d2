"""Custom format condition variants, selected by their implementation name."""

from ..records import CONDITION
from .descriptor import VariantDescriptor, optional, required

_FLAGS = (
    optional("negate"),
    optional("required"),
)

RELEASE_TITLE = VariantDescriptor(
    resource_name="condition_release_title",
    family=CONDITION,
    implementation="ReleaseTitleSpecification",
    attributes=_FLAGS + (required("value", description="Regular expression matched against the release title."),),
)

RELEASE_GROUP = VariantDescriptor(
    resource_name="condition_release_group",
    family=CONDITION,
    implementation="ReleaseGroupSpecification",
    attributes=_FLAGS + (required("value", description="Regular expression matched against the release group."),),
)

SIZE = VariantDescriptor(
    resource_name="condition_size",
    family=CONDITION,
    implementation="SizeSpecification",
    attributes=_FLAGS + (
        required("min", ge=0, description="Minimum size in GB."),
        required("max", ge=0, description="Maximum size in GB."),
    ),
)

CONDITION_VARIANTS = (
    RELEASE_TITLE,
    RELEASE_GROUP,
    SIZE,
)
