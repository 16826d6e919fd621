"""Unit tests for location scopes and the compatibility rule."""

import pytest

from domain.base.exceptions import InvalidArgumentError, InvalidStateError
from domain.location.hierarchy import LocationCompatible, is_compatible
from domain.location.value_objects import Location, LocationScope


@pytest.mark.unit
class TestLocation:
    """Test cases for the Location value object."""

    def test_equality_by_scope_and_id(self, locations):
        """Test that descriptions and parents do not affect equality."""
        region = locations["us-east-1"]
        same = Location(id="us-east-1", scope=LocationScope.REGION, description="other")

        assert region == same
        assert hash(region) == hash(same)
        assert region != Location(id="us-east-1", scope=LocationScope.ZONE, parent=region)

    def test_orphan_is_constructible(self):
        """Test that malformed catalog data stays representable."""
        orphan = Location(id="lost", scope=LocationScope.ZONE)

        assert orphan.is_orphaned
        assert not Location(id="aws", scope=LocationScope.PROVIDER).is_orphaned

    def test_ancestors_nearest_first(self, locations):
        """Test the parent chain order."""
        assert [loc.id for loc in locations["host-1"].ancestors()] == [
            "us-east-1a",
            "us-east-1",
            "aws",
        ]

    def test_scope_ordering(self):
        """Test that wider scopes come first."""
        assert LocationScope.PROVIDER.is_wider_than(LocationScope.REGION)
        assert LocationScope.ZONE.is_wider_than(LocationScope.HOST)
        assert not LocationScope.ZONE.is_wider_than(LocationScope.REGION)
        assert not LocationScope.ZONE.is_wider_than(LocationScope.ZONE)


@pytest.mark.unit
class TestIsCompatible:
    """Test cases for is_compatible."""

    def test_absent_reference_or_candidate(self, locations):
        """Test that unbound resources and location-agnostic callers always match."""
        zone = locations["us-east-1a"]

        assert is_compatible(zone, None)
        assert is_compatible(None, zone)
        assert is_compatible(None, None)

    def test_same_location(self, locations):
        """Test that a location is compatible with itself."""
        assert is_compatible(locations["us-east-1a"], locations["us-east-1a"])

    def test_parent_and_grandparent(self, locations):
        """Test that resources in the parent or grandparent are usable."""
        provider = locations["aws"]
        region = locations["us-east-1"]
        zone = locations["us-east-1a"]

        assert is_compatible(provider, region)
        assert is_compatible(region, zone)
        assert is_compatible(provider, zone)

    def test_ancestor_search_stops_at_grandparent(self, locations):
        """Test that the great-grandparent is not searched."""
        assert is_compatible(locations["us-east-1"], locations["host-1"])
        assert not is_compatible(locations["aws"], locations["host-1"])

    def test_siblings_and_children_are_incompatible(self, locations):
        """Test that siblings and narrower locations are rejected."""
        assert not is_compatible(locations["us-west-2"], locations["us-east-1a"])
        assert not is_compatible(locations["us-east-1b"], locations["us-east-1a"])
        assert not is_compatible(locations["us-east-1a"], locations["us-east-1"])

    def test_orphaned_candidate_is_invalid_state(self, locations):
        """Test that an orphan in catalog data is reported as malformed data."""
        orphan = Location(id="lost", scope=LocationScope.ZONE)

        with pytest.raises(InvalidStateError) as exc_info:
            is_compatible(orphan, locations["us-east-1"])

        assert "only locations of scope PROVIDER can have a null parent" in str(exc_info.value)
        assert exc_info.value.details["location_id"] == "lost"

    def test_orphaned_reference_is_invalid_argument(self, locations):
        """Test that an orphan reference is reported as caller error."""
        orphan = Location(id="lost", scope=LocationScope.REGION)

        with pytest.raises(InvalidArgumentError):
            is_compatible(locations["us-east-1"], orphan)

    def test_orphans_rejected_even_when_other_side_absent(self):
        """Test that validation runs before the absence shortcuts."""
        orphan = Location(id="lost", scope=LocationScope.HOST)

        with pytest.raises(InvalidStateError):
            is_compatible(orphan, None)
        with pytest.raises(InvalidArgumentError):
            is_compatible(None, orphan)


@pytest.mark.unit
class TestLocationCompatible:
    """Test cases for the lazily bound location predicate."""

    def test_reads_reference_on_every_call(self, locations):
        """Test that the reference supplier is consulted each time."""
        current = {"location": locations["us-east-1a"]}
        predicate = LocationCompatible(lambda: current["location"])

        class Resource:
            location = locations["us-east-1"]

        assert predicate(Resource())
        current["location"] = locations["us-west-2a"]
        assert not predicate(Resource())

    def test_string_form(self):
        """Test the diagnostic name."""
        assert str(LocationCompatible(lambda: None)) == "locationCompatible()"
