"""
Alias folder names for categories.

People create folders like "pics", "camera roll" or "screenshots" for the
same thing. Instead of adding yet another "Image Files" folder next to them,
the organizer renames one such folder to the canonical category name. This
module holds the alias table and its reverse lookup.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

# Aliases are lowercase; folder names are lowercased before lookup.
CATEGORY_ALIASES: Dict[str, FrozenSet[str]] = {
    "Image Files": frozenset(
        {
            "img", "imgs", "image", "images", "pic", "pics", "picture",
            "pictures", "photo", "photos", "photography", "camera",
            "camera roll", "gallery", "photo gallery", "screenshots",
            "wallpapers", "backgrounds", "portraits", "landscapes", "selfies",
            "family photos", "vacation photos", "travel photos",
            "event photos", "wedding photos", "birthday photos",
            "nature photos", "street photos", "raw images", "edited photos",
            "final images", "scans", "prints", "artwork", "illustrations",
            "graphics", "icons", "logos", "thumbnails", "references",
            "inspiration", "concept art",
        }
    ),
    "Video Files": frozenset(
        {
            "video", "videos", "vid", "vids", "movie", "movies", "films",
            "clips", "recordings", "lectures", "screen captures",
            "tutorial videos", "courses", "vlogs", "reels", "shorts",
            "vacation videos", "travel videos", "family videos",
            "event videos", "wedding videos", "gameplay", "walkthroughs",
            "streams", "webinars", "meetings recordings", "interviews",
            "trailers", "screen recordings", "edits", "final cuts",
            "raw footage", "b roll", "montage", "highlights", "dashcam",
            "timelapse", "slow motion", "drone footage",
        }
    ),
    "Audio Files": frozenset(
        {
            "audio", "audios", "music", "songs", "tracks", "albums",
            "playlist", "playlists", "podcast", "podcasts", "audiobooks",
            "voice notes", "voice recordings", "lectures audio",
            "interviews audio", "sfx", "meetings audio", "sound effects",
            "background music", "instrumentals", "beats", "loops", "samples",
            "live recordings", "concerts", "practice", "rehearsals", "demos",
            "draft mixes", "final mixes", "masters", "exports", "ringtones",
            "notifications", "alarms", "ambient sounds", "nature sounds",
        }
    ),
    "Text Files": frozenset(
        {
            "text", "texts", "text files", "txt files", "notes", "plain text",
            "logs", "markdown", "readme", "documentation", "draft notes",
        }
    ),
    "PDF Files": frozenset(
        {
            "pdf", "pdfs", "pdf files", "documents pdf", "manuals pdf",
            "ebooks", "reports pdf", "invoices pdf", "statements pdf",
            "scanned pdfs",
        }
    ),
    "Word Files": frozenset(
        {
            "word", "word files", "documents word", "doc files", "docx files",
            "letters", "reports word", "essays", "assignments", "resumes",
            "cover letters",
        }
    ),
    "Excel Files": frozenset(
        {
            "excel", "excel files", "spreadsheets", "sheets",
            "financial sheets", "budgets", "expenses", "accounts",
            "tracking sheets", "reports excel", "tables",
        }
    ),
    "PowerPoint Files": frozenset(
        {
            "powerpoint", "powerpoint files", "presentations", "slides",
            "ppt files", "pptx files", "pitch decks", "lecture slides",
            "meeting slides",
        }
    ),
    "C Files": frozenset({"c", "c files", "c source", "c language", "c programs"}),
    "C++ Files": frozenset(
        {"cpp", "c++", "cplusplus", "cpp files", "c++ source", "c++ programs"}
    ),
    "Java Files": frozenset({"java", "java files", "java source", "java programs"}),
    "Python Files": frozenset(
        {
            "python", "python files", "python source", "py scripts",
            "python programs", "python scripts",
        }
    ),
    "JavaScript Files": frozenset(
        {"javascript", "javascript files", "js files", "js source"}
    ),
    "TypeScript Files": frozenset(
        {"typescript", "typescript files", "ts files", "ts source"}
    ),
    "Web Files": frozenset(
        {"web", "web files", "html files", "css files", "frontend", "frontend files"}
    ),
    "Shell Scripts": frozenset(
        {"shell", "shell scripts", "bash scripts", "terminal scripts"}
    ),
    "Go Files": frozenset({"go", "golang", "go files", "go source", "go programs"}),
    "Rust Files": frozenset(
        {"rust", "rust files", "rust source", "rs files", "rust programs"}
    ),
    "PHP Files": frozenset({"php", "php files", "php source", "php scripts"}),
    "Database Files": frozenset(
        {"database", "databases", "db", "db files", "sqlite", "sql files"}
    ),
    "Archive Files": frozenset(
        {
            "archive", "archives", "compressed", "compressed files",
            "zip files", "rar files", "backups", "backup archives",
        }
    ),
    "Executable Files": frozenset(
        {"executables", "binaries", "apps", "applications", "programs", "installers"}
    ),
    "Library Files": frozenset(
        {"libraries", "libs", "shared libraries", "static libraries"}
    ),
    "Config Files": frozenset(
        {
            "config", "configs", "configuration", "settings", "env files",
            "environment config",
        }
    ),
}


class AliasCatalog:
    """
    Immutable category -> aliases table with its reverse lookup.

    Attributes:
        aliases: Read-only mapping of canonical category to its aliases
        alias_lookup: Read-only mapping of alias to canonical category
    """

    def __init__(self, table: Mapping[str, Iterable[str]]):
        """
        Build the alias catalog.

        Args:
            table: Canonical category name -> alias folder names
        """
        aliases: Dict[str, FrozenSet[str]] = {}
        lookup: Dict[str, str] = {}
        for category, names in table.items():
            normalized = frozenset(name.lower() for name in names)
            aliases[category] = normalized
            for alias in normalized:
                # An alias listed twice belongs to the last category.
                lookup[alias] = category

        self.aliases: Mapping[str, FrozenSet[str]] = MappingProxyType(aliases)
        self.alias_lookup: Mapping[str, str] = MappingProxyType(lookup)

    def lookup(self, folder_name: str) -> Optional[str]:
        """
        Resolve a folder name to the category it stands for.

        Args:
            folder_name: Folder name in any case

        Returns:
            Canonical category name, or None if the name is not an alias
        """
        return self.alias_lookup.get(folder_name.lower())

    def is_alias(self, folder_name: str) -> bool:
        """Check whether a folder name is an alias of any category."""
        return self.lookup(folder_name) is not None

    def aliases_for(self, category: str) -> FrozenSet[str]:
        """Return the aliases of a category (empty if it has none)."""
        return self.aliases.get(category, frozenset())

    def __len__(self) -> int:
        return len(self.alias_lookup)

    def __repr__(self) -> str:
        return f"AliasCatalog({len(self.aliases)} categories, {len(self)} aliases)"


DEFAULT_ALIASES = AliasCatalog(CATEGORY_ALIASES)
