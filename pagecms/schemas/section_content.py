"""
Content schemas for every section type.

Each model describes the JSON document stored in a SectionTranslation.
Primitive fields are strict (no "85" -> 85 coercion) so that clients get a
format error instead of silently converted data.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, HttpUrl, StrictFloat, StrictInt, StrictStr

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

Title = Annotated[StrictStr, Field(min_length=1, max_length=100)]
Description = Annotated[StrictStr, Field(min_length=1, max_length=5000)]
NonEmpty = Annotated[StrictStr, Field(min_length=1)]
HexColor = Annotated[StrictStr, Field(pattern=HEX_COLOR_PATTERN)]
Opacity = Annotated[StrictFloat, Field(ge=0, le=1)]
Percentage = Annotated[StrictFloat, Field(ge=0, le=100)]


# ============== Shared blocks ==============


class BaseSectionContent(BaseModel):
    """Title and description; also the fallback for unregistered types."""

    title: Title
    description: Description


class BackgroundImage(BaseModel):
    url: HttpUrl
    overlay_color: HexColor | None = None
    overlay_opacity: Opacity | None = None


class PlainBackgroundImage(BaseModel):
    url: HttpUrl


class Image(BaseModel):
    url: HttpUrl
    alt: NonEmpty


class CaptionedImage(BaseModel):
    url: HttpUrl
    alt: Annotated[StrictStr, Field(min_length=1, max_length=200)]


class Dimensions(BaseModel):
    width: Annotated[StrictInt, Field(ge=1)]
    height: Annotated[StrictInt, Field(ge=1)]


class DimensionedImage(Image):
    dimensions: Dimensions


class Link(BaseModel):
    text: NonEmpty
    url: HttpUrl


class YoutubeVideo(BaseModel):
    url: HttpUrl


class TitledYoutubeVideo(YoutubeVideo):
    title: NonEmpty


# ============== Section schemas ==============


class HeroContent(BaseSectionContent):
    background_image: BackgroundImage


class MediaContent(BaseSectionContent):
    image: DimensionedImage


class TimelineItem(BaseModel):
    date: NonEmpty
    description: Description
    order: Annotated[StrictInt, Field(ge=0)]
    image: Image | None = None


class TimelineContent(BaseModel):
    items: Annotated[list[TimelineItem], Field(min_length=1)]


class FaqItem(BaseModel):
    question: NonEmpty
    answer: NonEmpty


class FaqContent(BaseModel):
    items: Annotated[list[FaqItem], Field(min_length=1)]


class TeamMember(BaseModel):
    image: Image
    name: Annotated[StrictStr, Field(min_length=1, max_length=100)]
    role: Annotated[StrictStr, Field(min_length=1, max_length=100)]
    description: Annotated[StrictStr, Field(min_length=1, max_length=500)]


class TeamContent(BaseModel):
    members: Annotated[list[TeamMember], Field(min_length=4, max_length=4)]


class MapCoordinates(BaseModel):
    lat: StrictFloat
    lng: StrictFloat


class ContactContent(BaseSectionContent):
    address: StrictStr | None = None
    email: Annotated[StrictStr, Field(pattern=EMAIL_PATTERN)] | None = None
    phone: StrictStr | None = None
    map_coordinates: MapCoordinates | None = None


class Strength(BaseModel):
    name: NonEmpty
    percentage: Percentage
    color: HexColor | None = None


class OurStrengthsContent(BaseSectionContent):
    background_image: BackgroundImage
    strengths: list[Strength]
    youtube_video: TitledYoutubeVideo


class FutureContent(BaseModel):
    description: Description
    background_image: PlainBackgroundImage
    link: Link | None = None


class SportCard(BaseModel):
    icon: NonEmpty
    title: Annotated[StrictStr, Field(min_length=1, max_length=50)]
    description: Annotated[StrictStr, Field(min_length=1, max_length=500)]


class SportsCardContent(BaseModel):
    cards: Annotated[list[SportCard], Field(min_length=4, max_length=4)]


class DiscoverContent(BaseModel):
    title: Title
    button: Link
    background_color: HexColor | None = None


class MissionContent(BaseSectionContent):
    youtube_video: YoutubeVideo
    buttons: Annotated[list[Link], Field(min_length=2, max_length=2)]


class IconExplanation(BaseModel):
    icon: NonEmpty
    title: Annotated[StrictStr, Field(min_length=1, max_length=100)]
    description: Annotated[StrictStr, Field(min_length=1, max_length=250)]
    # Small PNG uploaded as section media
    icon_url: HttpUrl | None = None


class GraphExampleContent(BaseSectionContent):
    image: Image
    icons_explanation: Annotated[list[IconExplanation], Field(min_length=1)]


class ImageSectionContent(BaseSectionContent):
    """Stats live, lineup and standings share this shape."""

    image: CaptionedImage


class SocialLink(BaseModel):
    platform: Literal["facebook", "youtube", "instagram", "twitter", "linkedin"]
    url: HttpUrl


class FooterContent(BaseSectionContent):
    social_links: list[SocialLink]
    copyright: NonEmpty
