"""Fixed vocabularies offered by the survey form."""

TOPICS = (
    "Technology",
    "Business",
    "Health & Wellness",
    "Entertainment",
    "Education",
    "Science",
    "Politics",
    "Sports",
    "Arts & Culture",
    "Other",
)

PODCAST_FORMATS = (
    "Interview",
    "Solo Commentary",
    "Panel Discussion",
    "Storytelling",
    "News & Analysis",
    "Educational",
    "Comedy",
    "Debate",
)
