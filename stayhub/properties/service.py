import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from stayhub.auth.schemas import Principal
from stayhub.config import settings
from stayhub.exceptions import PermissionDenied, PropertyHasActiveBookings, PropertyNotFound
from stayhub.properties.schemas import (
    Property, PropertyCreate, PropertyFilters, PropertyStatus, PropertyUpdate
)
from stayhub.store import EntityKind, EntityStore

logger = logging.getLogger(__name__)

# Booking statuses that block a property deletion when the policy is enabled
_ACTIVE_BOOKING_STATUSES = ("pending", "confirmed")


def matches_filters(prop: Property, criteria: Mapping[str, Any]) -> bool:
    """Apply listing predicates; falsy criteria and unknown keys always match"""
    for key, value in criteria.items():
        if not value:
            continue
        if key == "property_type":
            if prop.property_type != value:
                return False
        elif key == "location":
            if str(value).lower() not in prop.location.lower():
                return False
        elif key == "max_guests":
            if prop.max_guests < int(value):
                return False
        elif key == "price_per_night":
            if prop.price_per_night > int(value):
                return False
    return True


class PropertyService:
    """Property catalog: CRUD, host ownership and listing visibility"""

    def __init__(self, store: EntityStore, forbid_delete_with_active_bookings: Optional[bool] = None):
        self.store = store
        if forbid_delete_with_active_bookings is None:
            forbid_delete_with_active_bookings = settings.FORBID_DELETE_WITH_ACTIVE_BOOKINGS
        self.forbid_delete_with_active_bookings = forbid_delete_with_active_bookings

    def create(self, principal: Principal, request: PropertyCreate) -> Property:
        """Create a property owned by the calling host"""
        if not principal.is_host:
            logger.warning("User %s is not a host and cannot list properties", principal.user_id)
            raise PermissionDenied("Only hosts can create properties")

        prop = Property(host_id=principal.user_id, **request.model_dump())
        created = self.store.put(EntityKind.PROPERTY, prop)
        logger.info("Property %s created by host %s", created.id, principal.user_id)
        return created

    def get_by_id(self, property_id: int) -> Optional[Property]:
        return self.store.get(EntityKind.PROPERTY, property_id)

    def require(self, property_id: int) -> Property:
        prop = self.get_by_id(property_id)
        if prop is None:
            raise PropertyNotFound()
        return prop

    def list_by_host(self, host_id: int) -> List[Property]:
        """All of a host's properties, drafts and inactive ones included"""
        return [p for p in self.store.find_all(EntityKind.PROPERTY) if p.host_id == host_id]

    def list_filtered(self, criteria: Union[PropertyFilters, Mapping[str, Any], None] = None) -> List[Property]:
        """Active properties matching the given criteria"""
        if criteria is None:
            criteria = {}
        elif isinstance(criteria, PropertyFilters):
            criteria = criteria.model_dump()

        return [
            p for p in self.store.find_all(EntityKind.PROPERTY)
            if matches_filters(p, criteria) and p.status == PropertyStatus.ACTIVE
        ]

    def update(
        self,
        principal: Principal,
        property_id: int,
        partial: Union[PropertyUpdate, Dict[str, Any]]
    ) -> Optional[Property]:
        """Update a property; only its host may do so"""
        if isinstance(partial, PropertyUpdate):
            partial = partial.model_dump(exclude_unset=True, exclude_none=True)
        # Ownership and the derived rating are not host-editable; null means unchanged
        partial = {
            k: v for k, v in partial.items()
            if v is not None and k not in ("host_id", "rating", "created_at")
        }

        with self.store.transaction():
            prop = self.get_by_id(property_id)
            if prop is None:
                return None
            self._check_owner(principal, prop, "update")
            updated = self.store.update(EntityKind.PROPERTY, property_id, partial)

        logger.info("Property %s updated by host %s", property_id, principal.user_id)
        return updated

    def update_rating(self, property_id: int, rating: Optional[str]) -> Optional[Property]:
        """Write back the derived rating aggregate"""
        return self.store.update(EntityKind.PROPERTY, property_id, {"rating": rating})

    def delete(self, principal: Principal, property_id: int) -> bool:
        """Hard-delete a property; bookings referencing it are left as they are"""
        with self.store.transaction():
            prop = self.get_by_id(property_id)
            if prop is None:
                return False
            self._check_owner(principal, prop, "delete")

            if self.forbid_delete_with_active_bookings and self._has_active_bookings(property_id):
                logger.warning("Refusing to delete property %s with active bookings", property_id)
                raise PropertyHasActiveBookings()

            deleted = self.store.delete(EntityKind.PROPERTY, property_id)

        logger.info("Property %s deleted by host %s", property_id, principal.user_id)
        return deleted

    def _has_active_bookings(self, property_id: int) -> bool:
        return any(
            b.property_id == property_id and b.status in _ACTIVE_BOOKING_STATUSES
            for b in self.store.find_all(EntityKind.BOOKING)
        )

    @staticmethod
    def _check_owner(principal: Principal, prop: Property, action: str) -> None:
        if prop.host_id != principal.user_id:
            logger.warning("User %s may not %s property %s", principal.user_id, action, prop.id)
            raise PermissionDenied(f"Not authorized to {action} this property")
