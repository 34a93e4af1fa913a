"""
Section Schema Registry.

Single lookup table from a section type to everything needed to validate
its content and to explain a failure: the pydantic schema, an example
payload, a description of the section and per-field help texts.

Adding a section type means adding one SECTION_ENTRIES item.
"""

import copy
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from pagecms.models.section import SectionType
from pagecms.schemas.section_content import (
    BaseSectionContent,
    ContactContent,
    DiscoverContent,
    FaqContent,
    FooterContent,
    FutureContent,
    GraphExampleContent,
    HeroContent,
    ImageSectionContent,
    MediaContent,
    MissionContent,
    OurStrengthsContent,
    SportsCardContent,
    TeamContent,
    TimelineContent,
)

logger = logging.getLogger(__name__)

_INDEX_SEGMENT = re.compile(r"\.\d+(?=\.|$)")

TITLE_HELP = "Main heading for the section (max 100 characters)"
OVERLAY_COLOR_HELP = "Optional hex color for overlay (e.g., #000000)"
OVERLAY_OPACITY_HELP = "Optional opacity for overlay (0-1)"


class UnknownSectionType(KeyError):
    """No schema is registered for the requested section type."""

    def __init__(self, section_type: Any):
        self.section_type = section_type
        super().__init__(f"No schema registered for section type {_type_name(section_type)}")


@dataclass(frozen=True)
class SectionSchemaEntry:
    """Validation schema plus the metadata used to explain failures."""

    schema: type[BaseModel]
    description: str
    example: dict[str, Any] | None = None
    example_explanation: str | None = None
    field_descriptions: Mapping[str, str] = field(default_factory=dict)
    field_messages: Mapping[str, str] = field(default_factory=dict)


def _type_name(section_type: Any) -> str:
    return section_type.value if isinstance(section_type, SectionType) else str(section_type)


def template_path(path: str) -> str:
    """Strip list indices from a dotted path: 'members.2.name' -> 'members.name'."""
    return _INDEX_SEGMENT.sub("", path)


class SectionSchemaRegistry:
    """Read-only lookup over a table of SectionSchemaEntry values."""

    def __init__(
        self,
        entries: Mapping[SectionType, SectionSchemaEntry],
        default_schema: type[BaseModel] = BaseSectionContent,
    ) -> None:
        self._entries = dict(entries)
        self._default_schema = default_schema

    def __contains__(self, section_type: Any) -> bool:
        return section_type in self._entries

    def section_types(self) -> list[SectionType]:
        return list(self._entries)

    @property
    def default_schema(self) -> type[BaseModel]:
        return self._default_schema

    def schema_for(self, section_type: SectionType) -> type[BaseModel]:
        """
        Get the validation schema for a section type.

        Raises:
            UnknownSectionType: If nothing is registered for the type
        """
        entry = self._entries.get(section_type)
        if entry is None:
            raise UnknownSectionType(section_type)
        return entry.schema

    def schema_or_default(self, section_type: SectionType) -> type[BaseModel]:
        """Get the registered schema, or the generic title/description schema."""
        try:
            return self.schema_for(section_type)
        except UnknownSectionType:
            logger.warning(
                f"No schema for section type {_type_name(section_type)}, using generic schema"
            )
            return self._default_schema

    def example_for(self, section_type: SectionType) -> dict[str, Any] | None:
        entry = self._entries.get(section_type)
        if entry is None or entry.example is None:
            return None
        return copy.deepcopy(entry.example)

    def description_for(self, section_type: SectionType) -> str:
        entry = self._entries.get(section_type)
        if entry is None:
            return "Section for content management"
        return entry.description

    def example_explanation_for(self, section_type: SectionType) -> str:
        entry = self._entries.get(section_type)
        if entry is None or not entry.example_explanation:
            return "Example content for this section type"
        return entry.example_explanation

    def field_descriptions_for(
        self, section_type: SectionType, field_names: Iterable[str]
    ) -> dict[str, str]:
        entry = self._entries.get(section_type)
        known = entry.field_descriptions if entry else {}
        name = _type_name(section_type)
        return {
            field_name: known.get(field_name) or f"Field {field_name} for {name} section"
            for field_name in field_names
        }

    def field_message_for(self, section_type: SectionType, path: str) -> str | None:
        """Section-specific help for a (possibly indexed) field path."""
        entry = self._entries.get(section_type)
        if entry is None:
            return None
        return entry.field_messages.get(template_path(path))


# ============== Registry table ==============


def _image(name: str) -> str:
    return f"https://example.com/images/{name}"


SECTION_ENTRIES: dict[SectionType, SectionSchemaEntry] = {
    SectionType.HERO: SectionSchemaEntry(
        schema=HeroContent,
        description=(
            "The HERO section is the main banner of the page: a large background "
            "image with the page title and a short introduction."
        ),
        example={
            "title": "Welcome Title",
            "description": "Brief welcome message or introduction",
            "background_image": {
                "url": _image("hero-bg.jpg"),
                "overlay_color": "#000000",
                "overlay_opacity": 0.5,
            },
        },
        example_explanation=(
            "This example shows a HERO section with a background image, main title "
            "and a brief description. overlay_color and overlay_opacity are optional."
        ),
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Brief introduction shown under the title (max 5000 characters)",
            "background_image": "Full-width background image with optional overlay",
        },
        field_messages={
            "title": "Main title for the hero section",
            "description": "Brief description shown under the hero title",
            "background_image.url": "URL for the large background image (e.g., stadium or sports-related)",
            "background_image.overlay_color": OVERLAY_COLOR_HELP,
            "background_image.overlay_opacity": OVERLAY_OPACITY_HELP,
        },
    ),
    SectionType.CONTENT: SectionSchemaEntry(
        schema=MediaContent,
        description=(
            "The CONTENT section holds a block of long-form text with one illustrative "
            "image, used for policy pages."
        ),
        example={
            "title": "Privacy Policy",
            "description": "How we collect, use and protect personal data.",
            "image": {
                "url": _image("policy.jpg"),
                "alt": "Illustration for the policy page",
                "dimensions": {"width": 1200, "height": 630},
            },
        },
        example_explanation="This example shows a CONTENT section with text and a sized image.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Body text of the section (max 5000 characters)",
            "image": "Image with url, alt text and pixel dimensions",
        },
        field_messages={
            "image.url": "URL of the section image",
            "image.alt": "Descriptive alt text for the section image",
            "image.dimensions.width": "Image width in pixels (positive integer)",
            "image.dimensions.height": "Image height in pixels (positive integer)",
        },
    ),
    SectionType.HISTORY: SectionSchemaEntry(
        schema=BaseSectionContent,
        description=(
            "The HISTORY section tells the story of the product's development, "
            "its founders and the team that built it."
        ),
        example={
            "title": "Our History",
            "description": "Brief history description explaining the key milestones and development.",
        },
        example_explanation="This example shows a HISTORY section with title and description.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "History of the product, founders and development team (max 5000 characters)",
        },
        field_messages={
            "title": "Title for the History section (e.g., 'Our History')",
            "description": "Detailed explanation of the history, including founders and development team",
        },
    ),
    SectionType.BORN: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="The BORN section explains how the product came to be, its origin story and purpose.",
        example={
            "title": "Our Story",
            "description": "Brief description of how the project started.",
        },
        example_explanation="This example shows a BORN section with title and description.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "How the product was born and its purpose (max 5000 characters)",
        },
        field_messages={
            "title": "Title for the BORN section explaining how the product came to be",
            "description": "Detailed explanation of the product's origin and purpose",
        },
    ),
    SectionType.TEAM: SectionSchemaEntry(
        schema=TeamContent,
        description=(
            "The TEAM section presents exactly four key members with profile image, "
            "name, role and a short background."
        ),
        example={
            "members": [
                {
                    "image": {"url": _image(f"team/member{n}.jpg"), "alt": f"Portrait of team member {n}"},
                    "name": f"Team Member {n}",
                    "role": "Position Title",
                    "description": "Brief professional background.",
                }
                for n in range(1, 5)
            ],
        },
        example_explanation="This example shows a TEAM section with the required four members.",
        field_descriptions={
            "members": "Exactly 4 team members",
        },
        field_messages={
            "members": "Exactly 4 team members are required",
            "members.image.url": "URL of the team member's profile image",
            "members.image.alt": "Alt text for the team member's profile image",
            "members.name": "Full name of the team member",
            "members.role": "Role or position in the company",
            "members.description": "Brief description of the team member's background or responsibilities",
        },
    ),
    SectionType.TIMELINE: SectionSchemaEntry(
        schema=TimelineContent,
        description="The TIMELINE section lists news entries in chronological order.",
        example={
            "items": [
                {
                    "date": "2024-03-15",
                    "description": "Launch of the new match graph.",
                    "order": 0,
                    "image": {"url": _image("news/graph-launch.jpg"), "alt": "New match graph"},
                },
                {
                    "date": "2024-04-02",
                    "description": "Tennis coverage added.",
                    "order": 1,
                },
            ],
        },
        example_explanation="This example shows a TIMELINE section with two entries; image is optional.",
        field_descriptions={
            "items": "News entries, at least one",
        },
        field_messages={
            "items": "List of news entries in chronological order",
            "items.date": "Date of the news entry (e.g., '2024-03-15')",
            "items.description": "Detailed description of the news entry (max 5000 characters)",
            "items.order": "Manual ordering number (0 or greater)",
            "items.image.url": "URL for the news entry image",
            "items.image.alt": "Descriptive alt text for the image",
        },
    ),
    SectionType.FAQ: SectionSchemaEntry(
        schema=FaqContent,
        description="The FAQ section holds a list of questions with their answers.",
        example={
            "items": [
                {"question": "Is the service free?", "answer": "A free plan is available."},
                {"question": "Which sports are covered?", "answer": "Soccer, tennis and basketball."},
            ],
        },
        example_explanation="This example shows a FAQ section with two entries.",
        field_descriptions={"items": "Question/answer pairs, at least one"},
        field_messages={
            "items.question": "Question text",
            "items.answer": "Answer text",
        },
    ),
    SectionType.CONTACT: SectionSchemaEntry(
        schema=ContactContent,
        description="The CONTACT section shows contact details and an optional map location.",
        example={
            "title": "Contact Us",
            "description": "We usually answer within one business day.",
            "address": "Via Roma 1, Milano",
            "email": "info@example.com",
            "phone": "+39 02 0000000",
            "map_coordinates": {"lat": 45.4642, "lng": 9.19},
        },
        example_explanation="This example shows a CONTACT section; every field after description is optional.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Introductory text (max 5000 characters)",
            "address": "Postal address",
            "email": "Contact email address",
            "phone": "Contact phone number",
            "map_coordinates": "Latitude/longitude for the map pin",
        },
        field_messages={
            "email": "Contact email must be a valid email address",
        },
    ),
    SectionType.SPORTS_CARD: SectionSchemaEntry(
        schema=SportsCardContent,
        description=(
            "The SPORTS_CARD section displays exactly 4 cards, one per supported sport, "
            "each with an icon, title and description."
        ),
        example={
            "cards": [
                {"icon": "soccer", "title": "Soccer", "description": "Live trends for major leagues."},
                {"icon": "tennis", "title": "Tennis", "description": "Point-by-point momentum."},
                {"icon": "basket", "title": "Basketball", "description": "Quarter trends and runs."},
                {"icon": "other", "title": "Other Sports", "description": "More sports coming soon."},
            ],
        },
        example_explanation="This example shows a SPORTS_CARD section with exactly 4 sport cards.",
        field_descriptions={"cards": "Exactly 4 sport cards"},
        field_messages={
            "cards": "Exactly 4 sport cards are required",
            "cards.icon": "Icon identifier for the sport (e.g., 'soccer', 'tennis', 'basket', 'other')",
            "cards.title": "Title of the sport card (e.g., 'Soccer', 'Tennis')",
            "cards.description": "Description of the sport's features and availability",
        },
    ),
    SectionType.MISSION: SectionSchemaEntry(
        schema=MissionContent,
        description=(
            "The MISSION section states the mission next to a YouTube video, "
            "with exactly two call-to-action buttons."
        ),
        example={
            "title": "Mission Title",
            "description": "Brief description of the mission and goals",
            "youtube_video": {"url": "https://www.youtube.com/watch?v=example"},
            "buttons": [
                {"text": "First Action", "url": "https://example.com/action1"},
                {"text": "Second Action", "url": "https://example.com/action2"},
            ],
        },
        example_explanation="This example shows a MISSION section with a video and its two buttons.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Mission and goals (max 5000 characters)",
            "youtube_video": "Video shown in the left column",
            "buttons": "Exactly 2 call-to-action buttons",
        },
        field_messages={
            "title": "Title for the mission section",
            "description": "Description explaining the mission and goals",
            "youtube_video.url": "URL of the YouTube video to display in the left column",
            "buttons": "Exactly two call-to-action buttons are required",
            "buttons.text": "Text for the call-to-action button",
            "buttons.url": "URL for the button action",
        },
    ),
    SectionType.GRAPH_HOW: SectionSchemaEntry(
        schema=BaseSectionContent,
        description=(
            "The GRAPH_HOW section explains how the match graph works: the histogram "
            "bars, their meaning and how to read them."
        ),
        example={
            "title": "Understanding the Match Graph",
            "description": "Brief explanation of how the match graph works and how to interpret the bars.",
        },
        example_explanation="This example shows a GRAPH_HOW section with title and description.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "How the graph works (max 5000 characters)",
        },
        field_messages={
            "title": "Title for the graph explanation section",
            "description": "Detailed explanation of how the graph works",
        },
    ),
    SectionType.GRAPH_EXAMPLE: SectionSchemaEntry(
        schema=GraphExampleContent,
        description=(
            "The GRAPH_EXAMPLE section is a visual guide to the icons used in the match "
            "graph: an example image plus an explanation for each icon."
        ),
        example={
            "title": "Graph Icons Guide",
            "description": "Quick guide to the icons and indicators in the match graph",
            "image": {
                "url": _image("graph-icons-guide.webp"),
                "alt": "Visual guide showing graph icons and their placement",
            },
            "icons_explanation": [
                {"icon": "goal", "title": "Goal Scored", "description": "Marks when a goal occurs in the match"},
                {"icon": "corner", "title": "Corner Kick", "description": "Indicates a corner kick event"},
            ],
        },
        example_explanation="This example shows a GRAPH_EXAMPLE section with an image and two icon explanations.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Overall explanation of the graph visualization (max 5000 characters)",
            "image": "Example graph image showing all icons",
            "icons_explanation": "List of icon explanations with their meanings",
        },
        field_messages={
            "image.url": "URL for the graph example image showing all possible icons and states",
            "image.alt": "Descriptive alt text for the graph example image",
            "icons_explanation": "Array of icon explanations that appear in the graph",
            "icons_explanation.icon": "Icon identifier (e.g., 'goal', 'corner', 'red_card', 'substitution')",
            "icons_explanation.title": "Short title for the icon (e.g., 'Goal Scored', 'Corner Kick')",
            "icons_explanation.description": "Brief explanation of what the icon represents in the graph",
            "icons_explanation.icon_url": "Optional URL of a small PNG for the icon",
        },
    ),
    SectionType.EVENTS: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="The EVENTS section is a guide to match events and what they indicate.",
        example={
            "title": "Match Events Guide",
            "description": "Guide to understanding match events and their indicators",
        },
        example_explanation="This example shows an EVENTS section with title and description.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Overview of match events and their meanings (max 5000 characters)",
        },
        field_messages={
            "title": "Title for the events section",
            "description": "Overview of match events and their meanings",
        },
    ),
    SectionType.STATS_LIVE: SectionSchemaEntry(
        schema=ImageSectionContent,
        description="The STATS_LIVE section explains the live match statistics panel.",
        example={
            "title": "Live Match Statistics",
            "description": "View all live match statistics including goals, shots and possession.",
            "image": {
                "url": _image("stats-live-example.webp"),
                "alt": "Example of the live match statistics panel",
            },
        },
        example_explanation="This example shows a STATS_LIVE section with its example image.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Explanation of live statistics (max 5000 characters)",
            "image": "Stats live example image",
        },
        field_messages={
            "image.url": "URL for the stats live example image",
            "image.alt": "Descriptive alt text for the stats live image",
        },
    ),
    SectionType.STANDINGS: SectionSchemaEntry(
        schema=ImageSectionContent,
        description="The STANDINGS section explains the standings table and its features.",
        example={
            "title": "Standings Table",
            "description": "Description explaining the standings table and features",
            "image": {"url": _image("standings-example.webp"), "alt": "Standings table example"},
        },
        example_explanation="This example shows a STANDINGS section with its example image.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Standings table explanation (max 5000 characters)",
            "image": "Standings example image",
        },
        field_messages={
            "image.url": "URL for the standings example image",
            "image.alt": "Descriptive alt text for the standings image",
        },
    ),
    SectionType.LINEUP: SectionSchemaEntry(
        schema=ImageSectionContent,
        description="The LINEUP section explains the lineup visualization.",
        example={
            "title": "Lineup Visualization",
            "description": "Description explaining the lineup visualization and features",
            "image": {"url": _image("lineup-example.webp"), "alt": "Lineup visualization example"},
        },
        example_explanation="This example shows a LINEUP section with its example image.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Lineup visualization explanation (max 5000 characters)",
            "image": "Lineup example image",
        },
        field_messages={
            "image.url": "URL for the lineup example image",
            "image.alt": "Descriptive alt text for the lineup image",
        },
    ),
    SectionType.FOOTER: SectionSchemaEntry(
        schema=FooterContent,
        description="The FOOTER section is the global site footer with social links and copyright.",
        example={
            "title": "Stay in touch",
            "description": "Follow us for updates.",
            "social_links": [
                {"platform": "facebook", "url": "https://facebook.com/example"},
                {"platform": "youtube", "url": "https://youtube.com/@example"},
            ],
            "copyright": "© 2025 Example Ltd.",
        },
        example_explanation="This example shows a FOOTER section with two social links.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Short footer text (max 5000 characters)",
            "social_links": "Social profiles (facebook, youtube, instagram, twitter, linkedin)",
            "copyright": "Copyright line",
        },
        field_messages={
            "social_links.platform": "Platform must be one of facebook, youtube, instagram, twitter, linkedin",
            "social_links.url": "URL of the social profile",
            "copyright": "Copyright text is required",
        },
    ),
    SectionType.OUR_STRENGTHS: SectionSchemaEntry(
        schema=OurStrengthsContent,
        description=(
            "The OUR_STRENGTHS section shows the core capabilities: background image, "
            "title and description, progress bars with percentages and a presentation video."
        ),
        example={
            "title": "Core Strengths",
            "description": "Brief overview of our capabilities",
            "background_image": {
                "url": _image("strengths-bg.jpg"),
                "overlay_color": "#000000",
                "overlay_opacity": 0.5,
            },
            "strengths": [
                {"name": "Example Strength 1", "percentage": 85, "color": "#28a745"},
                {"name": "Example Strength 2", "percentage": 75},
            ],
            "youtube_video": {"url": "https://www.youtube.com/watch?v=example", "title": "Video Title"},
        },
        example_explanation=(
            "This example shows how to list strengths with their percentages. The color "
            "field is optional; a default color is used when it is missing."
        ),
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Key capabilities overview (max 5000 characters)",
            "background_image": "Background image with optional overlay",
            "strengths": "Progress bars: name, percentage 0-100, optional color",
            "youtube_video": "Presentation video with title",
        },
        field_messages={
            "title": "Title for the Our Strengths section",
            "description": "Description explaining the key capabilities",
            "background_image.url": "URL for the background image",
            "background_image.overlay_color": OVERLAY_COLOR_HELP,
            "background_image.overlay_opacity": OVERLAY_OPACITY_HELP,
            "strengths": "List of key capabilities with name and percentage",
            "strengths.name": "Each strength must have a name describing the capability",
            "strengths.percentage": "Percentage must be a number between 0 and 100",
            "strengths.color": "Optional hex color for the progress bar (e.g., #28a745)",
            "youtube_video.url": "URL of the YouTube video",
            "youtube_video.title": "Title of the YouTube video",
        },
    ),
    SectionType.FUTURE: SectionSchemaEntry(
        schema=FutureContent,
        description=(
            "The FUTURE section presents the vision for upcoming features over a "
            "background image, with an optional call-to-action link."
        ),
        example={
            "description": "Brief description of future plans",
            "background_image": {"url": _image("crowd-stadium.jpg")},
            "link": {"text": "betting exchange", "url": "https://example.com/betting-exchange"},
        },
        example_explanation="This example shows a FUTURE section with background image and the optional link.",
        field_descriptions={
            "description": "Future plans and integrations (max 5000 characters)",
            "background_image": "Background image",
            "link": "Optional call-to-action link",
        },
        field_messages={
            "description": "Detailed description of future plans and integrations",
            "background_image.url": "URL for the background image (e.g., stadium or crowd image)",
            "link.text": "Text for the call-to-action link",
            "link.url": "URL the call-to-action link points to",
        },
    ),
    SectionType.DISCOVER: SectionSchemaEntry(
        schema=DiscoverContent,
        description=(
            "The DISCOVER section is a call-to-action pointing to the YouTube channel: "
            "a title and a button."
        ),
        example={
            "title": "Discover More",
            "button": {"text": "Watch Now", "url": "https://youtube.com/channel/example"},
            "background_color": "#0000FF",
        },
        example_explanation="This example shows a DISCOVER section; background_color is optional.",
        field_descriptions={
            "title": TITLE_HELP,
            "button": "Call-to-action button with text and url",
            "background_color": "Optional hex background color",
        },
        field_messages={
            "title": "Title for the discover section (e.g., 'Discover us on YouTube')",
            "button.text": "Text for the call-to-action button (e.g., 'View YouTube Channel')",
            "button.url": "URL to the YouTube channel",
            "background_color": "Optional hex color for the background (e.g., #0000FF)",
        },
    ),
    SectionType.SCORETREND_WHAT: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="The SCORETREND_WHAT section introduces what the product is.",
        example={
            "title": "What Is ScoreTrend?",
            "description": "Brief explanation of what the product is and its core functionality.",
        },
        example_explanation="This example shows a SCORETREND_WHAT section with title and description.",
        field_descriptions={
            "title": TITLE_HELP,
            "description": "What the product is (max 5000 characters)",
        },
        field_messages={
            "title": "Title for the 'What Is ScoreTrend?' section",
            "description": "Description explaining what the product is",
        },
    ),
    SectionType.TREND_OVERVIEW: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="Understanding Goal & Team Trends",
        example={
            "title": "Understanding Goal & Team Trends",
            "description": "Brief overview of how to interpret goal and team trend indicators",
        },
        field_descriptions={
            "title": TITLE_HELP,
            "description": "General explanation of goal and team trends (max 5000 characters)",
        },
    ),
    SectionType.GOAL_TREND: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="Goal Trend Explained",
        example={
            "title": "Goal Trend Explained",
            "description": "Brief explanation of goal trend values and their meaning",
        },
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Goal trend indicators and values (max 5000 characters)",
        },
    ),
    SectionType.TEAM_TREND: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="Team Trend Explained",
        example={
            "title": "Team Trend Explained",
            "description": "Brief explanation of team trend values and their meaning",
        },
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Team trend indicators and values (max 5000 characters)",
        },
    ),
    SectionType.TABS_UNDER_GAMES: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="Match Information Tabs",
        example={
            "title": "Match Information Tabs",
            "description": "Overview of the information available in match tabs",
        },
        field_descriptions={
            "title": TITLE_HELP,
            "description": "Available match information tabs (max 5000 characters)",
        },
    ),
    SectionType.EXPAND_EVENT: SectionSchemaEntry(
        schema=BaseSectionContent,
        description="The EXPAND_EVENT section explains the dedicated match page opened from an event.",
        example={
            "title": "Expand Event",
            "description": (
                "Clicking on expand event opens the page dedicated to the selected match, "
                "with a bigger histogram chart and all the side panels."
            ),
        },
        field_descriptions={
            "title": TITLE_HELP,
            "description": "What happens when expanding an event (max 5000 characters)",
        },
    ),
}


def build_default_registry() -> SectionSchemaRegistry:
    """Create a registry over the built-in section table."""
    return SectionSchemaRegistry(SECTION_ENTRIES)
