"""Page controllers — wire page events to the query core and a render sink."""

from folioctl.controllers.detail import DetailController
from folioctl.controllers.listing import ListingController
from folioctl.controllers.location import InMemoryHistory, Location

__all__ = ["DetailController", "InMemoryHistory", "ListingController", "Location"]
