"""
Emergency Resources

Mental-health resource directory for Nigerian students:
emergency lines, counseling services, self-help material,
academic and wellness support, and peer groups.

Built-in entries can be replaced or extended from a JSON file.

LEGAL_REVIEW_REQUIRED: Phone numbers and opening hours must be
verified for accuracy before each release.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional
import json
import os

from genibi.config.logging_config import get_logger

logger = get_logger(__name__)

# Crisis lines. Response bundles and fallback replies quote these too.
HELPLINE_NUMBER = "+234 806 027 0792"
EMERGENCY_NUMBER = "112"
POLICE_NUMBER = "199"

RESOURCE_CATEGORIES: tuple[str, ...] = (
    "emergency",
    "counseling",
    "self-help",
    "academic",
    "wellness",
    "support-groups",
)

CATEGORY_LABELS: dict[str, str] = {
    "emergency": "Emergency",
    "counseling": "Counseling",
    "self-help": "Self-Help",
    "academic": "Academic Support",
    "wellness": "Wellness",
    "support-groups": "Support Groups",
}

# Category filter value that means "no category filter"
ALL_CATEGORIES = "all"

SEARCH_SUGGESTIONS: tuple[str, ...] = (
    "anxiety",
    "depression",
    "stress management",
    "sleep problems",
    "academic pressure",
    "counseling",
    "emergency help",
    "mindfulness",
    "support groups",
    "wellness",
)

DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class MentalHealthResource:
    """
    A single directory entry.

    Attributes:
        id: Stable identifier
        title: Display name
        description: Short description
        category: One of RESOURCE_CATEGORIES
        resource_type: contact, website, article, audio, video
        phone: Phone number, if any
        email: Contact email, if any
        url: Website or content link, if any
        location: Where the service operates
        hours: Opening hours, empty for 24/7 lines
        emergency: Whether this is an immediate-contact line
        tags: Free-text search tags
    """

    id: str
    title: str
    description: str
    category: str
    resource_type: str
    phone: str = ""
    email: str = ""
    url: str = ""
    location: str = ""
    hours: str = ""
    emergency: bool = False
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "type": self.resource_type,
            "emergency": self.emergency,
            "tags": list(self.tags),
        }
        for key in ("phone", "email", "url", "location", "hours"):
            value = getattr(self, key)
            if value:
                data[key] = value
        return data

    def to_contact(self) -> dict:
        """Phone contact with a dialer link for the escalation UI."""
        dial = "".join(ch for ch in self.phone if ch.isdigit() or ch == "+")
        return {
            "name": self.title,
            "phone": self.phone,
            "link": f"tel:{dial}",
        }

    def matches(self, query: str) -> bool:
        query = query.lower()
        haystack = (self.title, self.description, *self.tags)
        return any(query in text.lower() for text in haystack)

    @classmethod
    def from_dict(cls, data: dict) -> "MentalHealthResource":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            category=data["category"],
            resource_type=data.get("type", data.get("resource_type", "contact")),
            phone=data.get("phone", ""),
            email=data.get("email", ""),
            url=data.get("url", ""),
            location=data.get("location", ""),
            hours=data.get("hours", ""),
            emergency=bool(data.get("emergency", False)),
            tags=tuple(data.get("tags", ())),
        )


@dataclass(frozen=True)
class ResourcePage:
    """A slice of directory results plus the unpaged total."""

    resources: tuple[MentalHealthResource, ...]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    def to_dict(self) -> dict:
        return {
            "resources": [r.to_dict() for r in self.resources],
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
            "hasMore": self.has_more,
        }


BUILT_IN_RESOURCES: tuple[MentalHealthResource, ...] = (
    MentalHealthResource(
        id="1",
        title="National Emergency Number",
        description="Nationwide emergency line for police, fire and ambulance",
        category="emergency",
        resource_type="contact",
        phone=EMERGENCY_NUMBER,
        location="Nigeria",
        emergency=True,
    ),
    MentalHealthResource(
        id="2",
        title="GENIBI 24/7 Helpline",
        description="Round-the-clock crisis support from the GENIBI team",
        category="emergency",
        resource_type="contact",
        phone=HELPLINE_NUMBER,
        location="Nigeria",
        emergency=True,
    ),
    MentalHealthResource(
        id="3",
        title="Police Emergency Line",
        description="Immediate emergency response",
        category="emergency",
        resource_type="contact",
        phone=POLICE_NUMBER,
        location="Nigeria",
        emergency=True,
    ),
    MentalHealthResource(
        id="4",
        title="University of Lagos Counseling Center",
        description="Free counseling services for UNILAG students",
        category="counseling",
        resource_type="contact",
        phone="+234-1-4932394",
        email="counseling@unilag.edu.ng",
        location="University of Lagos",
        hours="Mon-Fri 8AM-5PM",
    ),
    MentalHealthResource(
        id="5",
        title="Mentally Aware Nigeria Initiative (MANI)",
        description="Mental health advocacy and support organization",
        category="counseling",
        resource_type="website",
        url="https://mentallyawareng.org",
        phone="+234-809-993-6463",
        location="Nigeria",
    ),
    MentalHealthResource(
        id="6",
        title="She Writes Woman",
        description="Mental health support for women",
        category="counseling",
        resource_type="website",
        url="https://shewriteswoman.org",
        location="Nigeria",
    ),
    MentalHealthResource(
        id="7",
        title="Managing Anxiety: A Student Guide",
        description="Practical strategies for dealing with anxiety in university",
        category="self-help",
        resource_type="article",
        tags=("anxiety", "students", "coping"),
    ),
    MentalHealthResource(
        id="8",
        title="Mindfulness for Students",
        description="10-minute daily meditation practices",
        category="self-help",
        resource_type="audio",
        tags=("mindfulness", "meditation", "stress"),
    ),
    MentalHealthResource(
        id="9",
        title="Stress Management Techniques",
        description="Video series on managing academic stress",
        category="self-help",
        resource_type="video",
        tags=("stress", "academic", "techniques"),
    ),
    MentalHealthResource(
        id="10",
        title="Sleep Hygiene for Better Mental Health",
        description="Guide to improving sleep quality for mental wellness",
        category="self-help",
        resource_type="article",
        tags=("sleep", "wellness", "mental-health"),
    ),
    MentalHealthResource(
        id="11",
        title="Academic Success Center",
        description="Study skills and academic support services",
        category="academic",
        resource_type="contact",
        location="Campus",
        hours="Mon-Fri 9AM-6PM",
    ),
    MentalHealthResource(
        id="12",
        title="Time Management for Students",
        description="Learn effective time management strategies",
        category="academic",
        resource_type="article",
        tags=("time-management", "productivity", "students"),
    ),
    MentalHealthResource(
        id="13",
        title="Campus Fitness Center",
        description="Physical fitness and wellness programs",
        category="wellness",
        resource_type="contact",
        location="Campus",
        hours="Mon-Sun 6AM-10PM",
    ),
    MentalHealthResource(
        id="14",
        title="Nutrition for Mental Health",
        description="How diet affects your mental wellbeing",
        category="wellness",
        resource_type="article",
        tags=("nutrition", "diet", "mental-health"),
    ),
    MentalHealthResource(
        id="15",
        title="Student Mental Health Support Group",
        description="Peer support group for students facing mental health challenges",
        category="support-groups",
        resource_type="contact",
        location="Campus",
        hours="Wednesdays 4PM-6PM",
        tags=("peer-support", "students"),
    ),
)


class ResourceDirectory:
    """
    Queryable mental-health resource directory.

    Entries keep their authored order; emergency lines come first.

    Usage:
        directory = ResourceDirectory()
        lines = directory.emergency_contacts()
        counseling = directory.find(category="counseling")
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
    ) -> None:
        """
        Initialize directory.

        Args:
            config_path: Optional JSON file whose entries replace
                built-in entries with the same id and add new ones
        """
        self._resources: dict[str, MentalHealthResource] = {
            r.id: r for r in BUILT_IN_RESOURCES
        }

        if config_path and os.path.exists(config_path):
            self._load_config(config_path)

    def _load_config(self, config_path: str) -> None:
        """Load resources from a JSON list of entries."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            loaded = [MentalHealthResource.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(
                "Failed to load resources config, keeping built-in data",
                path=config_path,
                error=str(e),
            )
            return

        for resource in loaded:
            self._resources[resource.id] = resource

        logger.info(
            "Loaded resources config",
            path=config_path,
            resource_count=len(loaded),
        )

    def find(
        self,
        category: Optional[str] = None,
        emergency_only: bool = False,
        search: Optional[str] = None,
        resource_type: Optional[str] = None,
    ) -> list[MentalHealthResource]:
        """
        List resources with optional filters.

        Args:
            category: Restrict to one category ("all" disables the filter)
            emergency_only: Only immediate-contact lines
            search: Case-insensitive text in title, description or tags
            resource_type: Restrict to one type (contact, website, article, ...)

        Returns:
            Matching resources in directory order
        """
        results = list(self._resources.values())
        if category and category != ALL_CATEGORIES:
            results = [r for r in results if r.category == category]
        if resource_type:
            results = [r for r in results if r.resource_type == resource_type]
        if emergency_only:
            results = [r for r in results if r.emergency]
        if search:
            results = [r for r in results if r.matches(search)]
        return results

    def page(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        **filters,
    ) -> ResourcePage:
        """
        One page of ``find`` results.

        Args:
            limit: Maximum entries in the page
            offset: Entries to skip from the start of the results
            **filters: Passed through to ``find``

        Returns:
            ResourcePage with the slice and the unpaged total
        """
        results = self.find(**filters)
        return ResourcePage(
            resources=tuple(results[offset:offset + limit]),
            total=len(results),
            limit=limit,
            offset=offset,
        )

    def get(self, resource_id: str) -> Optional[MentalHealthResource]:
        return self._resources.get(resource_id)

    def categories(self) -> list[str]:
        """Known categories, in canonical order, that have entries."""
        present = {r.category for r in self._resources.values()}
        known = [c for c in RESOURCE_CATEGORIES if c in present]
        extra = sorted(present.difference(RESOURCE_CATEGORIES))
        return known + extra

    def category_summaries(self) -> list[dict]:
        """
        Every known category plus any extra ones from config,
        as ``{id, label, count}``. Known categories are listed
        even when empty.
        """
        counts = Counter(r.category for r in self._resources.values())
        ids = list(RESOURCE_CATEGORIES) + sorted(
            set(counts).difference(RESOURCE_CATEGORIES)
        )
        return [
            {
                "id": category,
                "label": CATEGORY_LABELS.get(category, category.replace("-", " ").title()),
                "count": counts[category],
            }
            for category in ids
        ]

    @staticmethod
    def search_suggestions() -> list[str]:
        return list(SEARCH_SUGGESTIONS)

    def emergency_contacts(self) -> list[MentalHealthResource]:
        """Emergency lines that can be dialed."""
        return [r for r in self.find(emergency_only=True) if r.phone]
