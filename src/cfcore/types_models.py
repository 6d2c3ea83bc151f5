"""
types_models.py

Typed dataclasses for the objects returned by the CurseForge Core API (v1).

Purpose
-------
- Provide typed, documented, read-only containers for API objects.
- Supply `from_dict()` factories to convert raw API JSON into typed objects,
  and `to_dict()` to go back to the API's camelCase shape.
- Keep the original raw payload available in `.raw` for forward-compatibility.

Notes
-----
- Field names mirror the API (camelCase) so docs and payloads line up.
- Numeric codes are converted to the enums below; codes this library does
  not know yet are kept as plain ints instead of failing.
- Timestamps are kept as the ISO strings the API sends; use the `*_dt`
  helpers for datetimes.
- Named `types_models` to avoid shadowing the stdlib `types` module.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from .utils import parse_datetime

T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E", bound=IntEnum)


# Enums
class CoreApiStatus(IntEnum):
    PRIVATE = 1
    PUBLIC = 2


class CoreStatus(IntEnum):
    DRAFT = 1
    TEST = 2
    PENDING_REVIEW = 3
    REJECTED = 4
    APPROVED = 5
    LIVE = 6


class FileRelationType(IntEnum):
    EMBEDDED_LIBRARY = 1
    OPTIONAL_DEPENDENCY = 2
    REQUIRED_DEPENDENCY = 3
    TOOL = 4
    INCOMPATIBLE = 5
    INCLUDE = 6


class FileReleaseType(IntEnum):
    RELEASE = 1
    BETA = 2
    ALPHA = 3


class FileStatus(IntEnum):
    PROCESSING = 1
    CHANGES_REQUIRED = 2
    UNDER_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    MALWARE_DETECTED = 6
    DELETED = 7
    ARCHIVED = 8
    TESTING = 9
    RELEASED = 10
    READY_FOR_REVIEW = 11
    DEPRECATED = 12
    BAKING = 13
    AWAITING_PUBLISHING = 14
    FAILED_PUBLISHING = 15


class HashAlgo(IntEnum):
    SHA1 = 1
    MD5 = 2


class ModLoaderType(IntEnum):
    """
    Mod loader filter / tag.

    ``ANY`` (0) is the "unspecified" value: as a search filter it matches
    every loader, and the API uses it for files not tied to one loader.
    """
    ANY = 0
    FORGE = 1
    CAULDRON = 2
    LITELOADER = 3
    FABRIC = 4
    QUILT = 5
    NEOFORGE = 6


class ModsSearchSortField(IntEnum):
    FEATURED = 1
    POPULARITY = 2
    LAST_UPDATED = 3
    NAME = 4
    AUTHOR = 5
    TOTAL_DOWNLOADS = 6
    CATEGORY = 7
    GAME_VERSION = 8
    EARLY_ACCESS = 9
    FEATURED_RELEASED = 10
    RELEASED_DATE = 11
    RATING = 12


class ModStatus(IntEnum):
    NEW = 1
    CHANGES_REQUIRED = 2
    UNDER_SOFT_REVIEW = 3
    APPROVED = 4
    REJECTED = 5
    CHANGES_MADE = 6
    INACTIVE = 7
    ABANDONED = 8
    DELETED = 9
    UNDER_REVIEW = 10


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Helpers
def _enum(enum_cls: Type[E], value: Any) -> Union[E, int, None]:
    """Coerce `value` to `enum_cls`, keeping unknown codes as ints."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _list(parse: Callable[[Dict[str, Any]], T], items: Optional[List[Any]]) -> List[T]:
    return [parse(item) for item in (items or [])]


def _optional(parse: Callable[[Dict[str, Any]], T], item: Optional[Dict[str, Any]]) -> Optional[T]:
    return parse(item) if item else None


def serialize(value: Any) -> Any:
    """Convert models, enums and containers into plain JSON values (``raw`` is left out)."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: serialize(getattr(value, f.name)) for f in fields(value) if f.name != "raw"}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    if isinstance(value, Mapping):
        return {k: serialize(v) for k, v in value.items()}
    return value


class _Model:
    """Mixin: `to_dict()` back to the API's JSON shape (without `raw`)."""

    def to_dict(self) -> Dict[str, Any]:
        return serialize(self)


def _raw():
    return field(default_factory=dict, repr=False, compare=False)


# Games
@dataclass(frozen=True)
class GameAssets(_Model):
    """Image assets of a game: small icon, tile and large cover."""
    iconUrl: Optional[str] = None
    tileUrl: Optional[str] = None
    coverUrl: Optional[str] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameAssets":
        d = d or {}
        return cls(iconUrl=d.get("iconUrl"), tileUrl=d.get("tileUrl"), coverUrl=d.get("coverUrl"), raw=d)


@dataclass(frozen=True)
class Game(_Model):
    """
    A game available to the API key (e.g. Minecraft, id 432).

    Attributes
    ----------
    id, name, slug : identity
    dateModified : Optional[str]
        ISO timestamp of the last change.
    assets : GameAssets
    status : CoreStatus
        Publishing state of the game on CurseForge for Studios.
    apiStatus : CoreApiStatus
        Whether the game is private to its own API key or public.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    dateModified: Optional[str] = None
    assets: GameAssets = field(default_factory=GameAssets)
    status: Optional[CoreStatus] = None
    apiStatus: Optional[CoreApiStatus] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Game":
        d = d or {}
        return cls(
            id=d.get("id"),
            name=d.get("name"),
            slug=d.get("slug"),
            dateModified=d.get("dateModified"),
            assets=GameAssets.from_dict(d.get("assets") or {}),
            status=_enum(CoreStatus, d.get("status")),
            apiStatus=_enum(CoreApiStatus, d.get("apiStatus")),
            raw=d,
        )

    @property
    def date_modified_dt(self) -> Optional[datetime]:
        return parse_datetime(self.dateModified)


@dataclass(frozen=True)
class GameVersionsByType(_Model):
    """Version strings of one game version type (``type`` is the version type id)."""
    type: Optional[int] = None
    versions: List[str] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameVersionsByType":
        d = d or {}
        return cls(type=d.get("type"), versions=list(d.get("versions") or []), raw=d)


@dataclass(frozen=True)
class GameVersionType(_Model):
    id: Optional[int] = None
    gameId: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameVersionType":
        d = d or {}
        return cls(id=d.get("id"), gameId=d.get("gameId"), name=d.get("name"), slug=d.get("slug"), raw=d)


# Categories
@dataclass(frozen=True)
class Category(_Model):
    """
    A category, or a class (top level category such as "Mods" or "Modpacks").

    Attributes
    ----------
    id : Optional[int]
    gameId : Optional[int]
        Game this category belongs to.
    name, slug, url, iconUrl : Optional[str]
    dateModified : Optional[str]
    isClass : Optional[bool]
        True when this entry is a class rather than a category.
    classId : Optional[int]
        The class this category is under.
    parentCategoryId : Optional[int]
        Parent category id; resolve with another `get_categories` call.
    displayIndex : Optional[int]
    """
    id: Optional[int] = None
    gameId: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    url: Optional[str] = None
    iconUrl: Optional[str] = None
    dateModified: Optional[str] = None
    isClass: Optional[bool] = None
    classId: Optional[int] = None
    parentCategoryId: Optional[int] = None
    displayIndex: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Category":
        d = d or {}
        return cls(
            id=d.get("id"),
            gameId=d.get("gameId"),
            name=d.get("name"),
            slug=d.get("slug"),
            url=d.get("url"),
            iconUrl=d.get("iconUrl"),
            dateModified=d.get("dateModified"),
            isClass=d.get("isClass"),
            classId=d.get("classId"),
            parentCategoryId=d.get("parentCategoryId"),
            displayIndex=d.get("displayIndex"),
            raw=d,
        )


# Files
@dataclass(frozen=True)
class FileHash(_Model):
    value: Optional[str] = None
    algo: Optional[HashAlgo] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileHash":
        d = d or {}
        return cls(value=d.get("value"), algo=_enum(HashAlgo, d.get("algo")), raw=d)


@dataclass(frozen=True)
class FileDependency(_Model):
    modId: Optional[int] = None
    fileId: Optional[int] = None
    relationType: Optional[FileRelationType] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileDependency":
        d = d or {}
        return cls(
            modId=d.get("modId"),
            fileId=d.get("fileId"),
            relationType=_enum(FileRelationType, d.get("relationType")),
            raw=d,
        )


@dataclass(frozen=True)
class FileModule(_Model):
    """A top level entry (folder or file) of an uploaded archive, with its fingerprint."""
    name: Optional[str] = None
    fingerprint: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileModule":
        d = d or {}
        return cls(name=d.get("name"), fingerprint=d.get("fingerprint"), raw=d)


@dataclass(frozen=True)
class SortableGameVersion(_Model):
    """
    Game version metadata used for sorting.

    gameVersionName is the original name (``1.5b``), gameVersionPadded the
    sortable form (``0000000001.0000000005``), gameVersion the clean name (``1.5``).
    """
    gameVersionName: Optional[str] = None
    gameVersionPadded: Optional[str] = None
    gameVersion: Optional[str] = None
    gameVersionReleaseDate: Optional[str] = None
    gameVersionTypeId: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SortableGameVersion":
        d = d or {}
        return cls(
            gameVersionName=d.get("gameVersionName"),
            gameVersionPadded=d.get("gameVersionPadded"),
            gameVersion=d.get("gameVersion"),
            gameVersionReleaseDate=d.get("gameVersionReleaseDate"),
            gameVersionTypeId=d.get("gameVersionTypeId"),
            raw=d,
        )

    @property
    def release_date_dt(self) -> Optional[datetime]:
        return parse_datetime(self.gameVersionReleaseDate)


@dataclass(frozen=True)
class FileIndex(_Model):
    """Entry of ``Mod.latestFilesIndexes``: latest file per game version / loader."""
    gameVersion: Optional[str] = None
    fileId: Optional[int] = None
    filename: Optional[str] = None
    releaseType: Optional[FileReleaseType] = None
    gameVersionTypeId: Optional[int] = None
    modLoader: Optional[ModLoaderType] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileIndex":
        d = d or {}
        return cls(
            gameVersion=d.get("gameVersion"),
            fileId=d.get("fileId"),
            filename=d.get("filename"),
            releaseType=_enum(FileReleaseType, d.get("releaseType")),
            gameVersionTypeId=d.get("gameVersionTypeId"),
            modLoader=_enum(ModLoaderType, d.get("modLoader")),
            raw=d,
        )


@dataclass(frozen=True)
class File(_Model):
    """
    A file uploaded to a mod.

    Important fields:
      - id / modId / gameId: identity and owners
      - fileName: exact server file name
      - hashes: sha1 / md5 digests
      - downloadUrl: may be None when the author disabled third party
        distribution; `get_mod_file_download_url` asks for it explicitly
      - fileFingerprint: the value matched by the fingerprint endpoints
      - dependencies: mod/file ids only, resolve them with further calls
    """
    id: Optional[int] = None
    gameId: Optional[int] = None
    modId: Optional[int] = None
    isAvailable: Optional[bool] = None
    displayName: Optional[str] = None
    fileName: Optional[str] = None
    releaseType: Optional[FileReleaseType] = None
    fileStatus: Optional[FileStatus] = None
    hashes: List[FileHash] = field(default_factory=list)
    fileDate: Optional[str] = None
    fileLength: Optional[int] = None
    downloadCount: Optional[int] = None
    downloadUrl: Optional[str] = None
    gameVersions: List[str] = field(default_factory=list)
    sortableGameVersions: List[SortableGameVersion] = field(default_factory=list)
    dependencies: List[FileDependency] = field(default_factory=list)
    exposeAsAlternative: Optional[bool] = None
    parentProjectFileId: Optional[int] = None
    alternateFileId: Optional[int] = None
    isServerPack: Optional[bool] = None
    serverPackFileId: Optional[int] = None
    fileFingerprint: Optional[int] = None
    modules: List[FileModule] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "File":
        d = d or {}
        return cls(
            id=d.get("id"),
            gameId=d.get("gameId"),
            modId=d.get("modId"),
            isAvailable=d.get("isAvailable"),
            displayName=d.get("displayName"),
            fileName=d.get("fileName"),
            releaseType=_enum(FileReleaseType, d.get("releaseType")),
            fileStatus=_enum(FileStatus, d.get("fileStatus")),
            hashes=_list(FileHash.from_dict, d.get("hashes")),
            fileDate=d.get("fileDate"),
            fileLength=d.get("fileLength"),
            downloadCount=d.get("downloadCount"),
            downloadUrl=d.get("downloadUrl"),
            gameVersions=list(d.get("gameVersions") or []),
            sortableGameVersions=_list(SortableGameVersion.from_dict, d.get("sortableGameVersions")),
            dependencies=_list(FileDependency.from_dict, d.get("dependencies")),
            exposeAsAlternative=d.get("exposeAsAlternative"),
            parentProjectFileId=d.get("parentProjectFileId"),
            alternateFileId=d.get("alternateFileId"),
            isServerPack=d.get("isServerPack"),
            serverPackFileId=d.get("serverPackFileId"),
            fileFingerprint=d.get("fileFingerprint"),
            modules=_list(FileModule.from_dict, d.get("modules")),
            raw=d,
        )

    @property
    def file_date_dt(self) -> Optional[datetime]:
        return parse_datetime(self.fileDate)

    def hash_for(self, algo: HashAlgo) -> Optional[str]:
        """Return the digest for `algo`, or None if the API did not send one."""
        for h in self.hashes:
            if h.algo == algo:
                return h.value
        return None

    def __repr__(self) -> str:
        return f"<File id={self.id} fileName={self.fileName!r} size={self.fileLength}>"


# Mods
@dataclass(frozen=True)
class ModLinks(_Model):
    websiteUrl: Optional[str] = None
    wikiUrl: Optional[str] = None
    issuesUrl: Optional[str] = None
    sourceUrl: Optional[str] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ModLinks":
        d = d or {}
        return cls(
            websiteUrl=d.get("websiteUrl"),
            wikiUrl=d.get("wikiUrl"),
            issuesUrl=d.get("issuesUrl"),
            sourceUrl=d.get("sourceUrl"),
            raw=d,
        )


@dataclass(frozen=True)
class ModAuthor(_Model):
    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ModAuthor":
        d = d or {}
        return cls(id=d.get("id"), name=d.get("name"), url=d.get("url"), raw=d)


@dataclass(frozen=True)
class ModAsset(_Model):
    """Logo or screenshot of a mod."""
    id: Optional[int] = None
    modId: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnailUrl: Optional[str] = None
    url: Optional[str] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ModAsset":
        d = d or {}
        return cls(
            id=d.get("id"),
            modId=d.get("modId"),
            title=d.get("title"),
            description=d.get("description"),
            thumbnailUrl=d.get("thumbnailUrl"),
            url=d.get("url"),
            raw=d,
        )


@dataclass(frozen=True)
class Mod(_Model):
    """
    A mod (project) and its metadata.

    Contains:
      - core fields like id, name, slug, summary
      - links, authors, logo and screenshots
      - categories (full objects) and primaryCategoryId / classId (ids only)
      - latestFiles as `File` instances and latestFilesIndexes
      - the raw JSON in `raw` for fields not mapped here
    """
    id: Optional[int] = None
    gameId: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    links: Optional[ModLinks] = None
    summary: Optional[str] = None
    status: Optional[ModStatus] = None
    downloadCount: Optional[int] = None
    isFeatured: Optional[bool] = None
    primaryCategoryId: Optional[int] = None
    categories: List[Category] = field(default_factory=list)
    classId: Optional[int] = None
    authors: List[ModAuthor] = field(default_factory=list)
    logo: Optional[ModAsset] = None
    screenshots: List[ModAsset] = field(default_factory=list)
    mainFileId: Optional[int] = None
    latestFiles: List[File] = field(default_factory=list)
    latestFilesIndexes: List[FileIndex] = field(default_factory=list)
    dateCreated: Optional[str] = None
    dateModified: Optional[str] = None
    dateReleased: Optional[str] = None
    allowModDistribution: Optional[bool] = None
    gamePopularityRank: Optional[int] = None
    isAvailable: Optional[bool] = None
    thumbsUpCount: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Mod":
        d = d or {}
        return cls(
            id=d.get("id"),
            gameId=d.get("gameId"),
            name=d.get("name"),
            slug=d.get("slug"),
            links=_optional(ModLinks.from_dict, d.get("links")),
            summary=d.get("summary"),
            status=_enum(ModStatus, d.get("status")),
            downloadCount=d.get("downloadCount"),
            isFeatured=d.get("isFeatured"),
            primaryCategoryId=d.get("primaryCategoryId"),
            categories=_list(Category.from_dict, d.get("categories")),
            classId=d.get("classId"),
            authors=_list(ModAuthor.from_dict, d.get("authors")),
            logo=_optional(ModAsset.from_dict, d.get("logo")),
            screenshots=_list(ModAsset.from_dict, d.get("screenshots")),
            mainFileId=d.get("mainFileId"),
            latestFiles=_list(File.from_dict, d.get("latestFiles")),
            latestFilesIndexes=_list(FileIndex.from_dict, d.get("latestFilesIndexes")),
            dateCreated=d.get("dateCreated"),
            dateModified=d.get("dateModified"),
            dateReleased=d.get("dateReleased"),
            allowModDistribution=d.get("allowModDistribution"),
            gamePopularityRank=d.get("gamePopularityRank"),
            isAvailable=d.get("isAvailable"),
            thumbsUpCount=d.get("thumbsUpCount"),
            raw=d,
        )

    @property
    def date_created_dt(self) -> Optional[datetime]:
        return parse_datetime(self.dateCreated)

    @property
    def date_modified_dt(self) -> Optional[datetime]:
        return parse_datetime(self.dateModified)

    @property
    def date_released_dt(self) -> Optional[datetime]:
        return parse_datetime(self.dateReleased)

    def __repr__(self) -> str:
        return f"<Mod id={self.id} name={self.name!r}>"


@dataclass(frozen=True)
class FeaturedModsResponse(_Model):
    featured: List[Mod] = field(default_factory=list)
    popular: List[Mod] = field(default_factory=list)
    recentlyUpdated: List[Mod] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FeaturedModsResponse":
        d = d or {}
        return cls(
            featured=_list(Mod.from_dict, d.get("featured")),
            popular=_list(Mod.from_dict, d.get("popular")),
            recentlyUpdated=_list(Mod.from_dict, d.get("recentlyUpdated")),
            raw=d,
        )


# Fingerprint matching
@dataclass(frozen=True)
class FolderFingerprint(_Model):
    """Fingerprints of the files found in one folder, input of fuzzy matching."""
    foldername: Optional[str] = None
    fingerprints: List[int] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FolderFingerprint":
        d = d or {}
        return cls(foldername=d.get("foldername"), fingerprints=list(d.get("fingerprints") or []), raw=d)


@dataclass(frozen=True)
class FingerprintMatch(_Model):
    """A matched file (`id` is the mod id) plus the mod's latest files."""
    id: Optional[int] = None
    file: Optional[File] = None
    latestFiles: List[File] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintMatch":
        d = d or {}
        return cls(
            id=d.get("id"),
            file=_optional(File.from_dict, d.get("file")),
            latestFiles=_list(File.from_dict, d.get("latestFiles")),
            raw=d,
        )


@dataclass(frozen=True)
class FingerprintsMatchesResult(_Model):
    """
    Result of exact fingerprint matching.

    Fields:
      - isCacheBuilt: whether the server side fingerprint index is ready
      - exactMatches / exactFingerprints: files matched exactly, and by which fingerprints
      - partialMatches / partialMatchFingerprints: partial matches, keyed by fingerprint
      - installedFingerprints: the fingerprints that were sent
      - unmatchedFingerprints: fingerprints with no match
    """
    isCacheBuilt: Optional[bool] = None
    exactMatches: List[FingerprintMatch] = field(default_factory=list)
    exactFingerprints: List[int] = field(default_factory=list)
    partialMatches: List[FingerprintMatch] = field(default_factory=list)
    partialMatchFingerprints: Dict[str, List[int]] = field(default_factory=dict)
    installedFingerprints: List[int] = field(default_factory=list)
    unmatchedFingerprints: List[int] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintsMatchesResult":
        d = d or {}
        return cls(
            isCacheBuilt=d.get("isCacheBuilt"),
            exactMatches=_list(FingerprintMatch.from_dict, d.get("exactMatches")),
            exactFingerprints=list(d.get("exactFingerprints") or []),
            partialMatches=_list(FingerprintMatch.from_dict, d.get("partialMatches")),
            partialMatchFingerprints=dict(d.get("partialMatchFingerprints") or {}),
            installedFingerprints=list(d.get("installedFingerprints") or []),
            unmatchedFingerprints=list(d.get("unmatchedFingerprints") or []),
            raw=d,
        )


@dataclass(frozen=True)
class FingerprintFuzzyMatch(_Model):
    id: Optional[int] = None
    file: Optional[File] = None
    latestFiles: List[File] = field(default_factory=list)
    fingerprints: List[int] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintFuzzyMatch":
        d = d or {}
        return cls(
            id=d.get("id"),
            file=_optional(File.from_dict, d.get("file")),
            latestFiles=_list(File.from_dict, d.get("latestFiles")),
            fingerprints=list(d.get("fingerprints") or []),
            raw=d,
        )


@dataclass(frozen=True)
class FingerprintFuzzyMatchResult(_Model):
    fuzzyMatches: List[FingerprintFuzzyMatch] = field(default_factory=list)
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FingerprintFuzzyMatchResult":
        d = d or {}
        return cls(fuzzyMatches=_list(FingerprintFuzzyMatch.from_dict, d.get("fuzzyMatches")), raw=d)


# Minecraft
@dataclass(frozen=True)
class MinecraftGameVersion(_Model):
    id: Optional[int] = None
    gameVersionId: Optional[int] = None
    versionString: Optional[str] = None
    jarDownloadUrl: Optional[str] = None
    jsonDownloadUrl: Optional[str] = None
    approved: Optional[bool] = None
    dateModified: Optional[str] = None
    gameVersionTypeId: Optional[int] = None
    gameVersionStatus: Optional[int] = None
    gameVersionTypeStatus: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MinecraftGameVersion":
        d = d or {}
        return cls(
            id=d.get("id"),
            gameVersionId=d.get("gameVersionId"),
            versionString=d.get("versionString"),
            jarDownloadUrl=d.get("jarDownloadUrl"),
            jsonDownloadUrl=d.get("jsonDownloadUrl"),
            approved=d.get("approved"),
            dateModified=d.get("dateModified"),
            gameVersionTypeId=d.get("gameVersionTypeId"),
            gameVersionStatus=d.get("gameVersionStatus"),
            gameVersionTypeStatus=d.get("gameVersionTypeStatus"),
            raw=d,
        )


@dataclass(frozen=True)
class MinecraftModLoaderIndex(_Model):
    """A mod loader build, e.g. ``forge-47.2.0`` for game version ``1.20.1``."""
    name: Optional[str] = None
    gameVersion: Optional[str] = None
    latest: bool = False
    recommended: bool = False
    dateModified: Optional[str] = None
    type: Optional[ModLoaderType] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MinecraftModLoaderIndex":
        d = d or {}
        return cls(
            name=d.get("name"),
            gameVersion=d.get("gameVersion"),
            latest=bool(d.get("latest", False)),
            recommended=bool(d.get("recommended", False)),
            dateModified=d.get("dateModified"),
            type=_enum(ModLoaderType, d.get("type")),
            raw=d,
        )

    @property
    def date_modified_dt(self) -> Optional[datetime]:
        return parse_datetime(self.dateModified)


# Envelopes
@dataclass(frozen=True)
class Pagination(_Model):
    """
    Slice of a larger result set.

    Attributes
    ----------
    index : int
        Zero based index of the first item included in the response.
    pageSize : int
        Requested number of items.
    resultCount : int
        Actual number of items included.
    totalCount : Optional[int]
        Total number of items available, None when the server does not know.
    """
    index: int = 0
    pageSize: int = 0
    resultCount: int = 0
    totalCount: Optional[int] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Pagination":
        d = d or {}
        return cls(
            index=d.get("index") or 0,
            pageSize=d.get("pageSize") or 0,
            resultCount=d.get("resultCount") or 0,
            totalCount=d.get("totalCount"),
            raw=d,
        )

    @property
    def has_more(self) -> bool:
        """True when items exist past this page (False if totalCount is unknown)."""
        if self.totalCount is None:
            return False
        return self.index + self.resultCount < self.totalCount


# some endpoints spell the key "paginaton"
_PAGINATION_KEYS = ("pagination", "paginaton")


@dataclass(frozen=True)
class ApiResponse(_Model, Generic[T]):
    """
    Response envelope: the typed payload under `data`, plus `pagination`
    for the list endpoints that paginate (None otherwise).
    """
    data: T
    pagination: Optional[Pagination] = None
    raw: Dict[str, Any] = _raw()

    @classmethod
    def from_dict(cls, d: Dict[str, Any], parse_data: Callable[[Any], T]) -> "ApiResponse[T]":
        if d is None:
            d = {}
        elif not isinstance(d, Mapping):
            raise TypeError(f"expected a JSON object as response body, got {type(d).__name__}")
        page = None
        for key in _PAGINATION_KEYS:
            if d.get(key) is not None:
                page = Pagination.from_dict(d[key])
                break
        return cls(data=parse_data(d.get("data")), pagination=page, raw=d)


def list_of(parse: Callable[[Dict[str, Any]], T]) -> Callable[[Optional[List[Any]]], List[T]]:
    """Lift an item parser into a parser for a JSON array."""
    def _parse(items: Optional[List[Any]]) -> List[T]:
        return _list(parse, items)
    return _parse


def as_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


GetGamesResponse = ApiResponse[List[Game]]
GetGameResponse = ApiResponse[Game]
GetVersionsResponse = ApiResponse[List[GameVersionsByType]]
GetVersionTypesResponse = ApiResponse[List[GameVersionType]]
GetCategoriesResponse = ApiResponse[List[Category]]
SearchModsResponse = ApiResponse[List[Mod]]
GetModResponse = ApiResponse[Mod]
GetModsResponse = ApiResponse[List[Mod]]
GetFeaturedModsResponse = ApiResponse[FeaturedModsResponse]
GetModFileResponse = ApiResponse[File]
GetModFilesResponse = ApiResponse[List[File]]
GetFilesResponse = ApiResponse[List[File]]
GetFingerprintMatchesResponse = ApiResponse[FingerprintsMatchesResult]
GetFingerprintFuzzyMatchesResponse = ApiResponse[FingerprintFuzzyMatchResult]
GetMinecraftVersionsResponse = ApiResponse[List[MinecraftGameVersion]]
GetMinecraftModLoadersResponse = ApiResponse[List[MinecraftModLoaderIndex]]
StringResponse = ApiResponse[Optional[str]]


@dataclass(frozen=True)
class ResponseData(Generic[R, T]):
    """
    What every client call returns: the raw transport response (for headers
    and status) and the parsed envelope. Unpacks as ``response, result``.
    """
    response: R
    result: T

    def __iter__(self) -> Iterator[Any]:
        yield self.response
        yield self.result


__all__ = [
    "CoreApiStatus", "CoreStatus", "FileRelationType", "FileReleaseType", "FileStatus",
    "HashAlgo", "ModLoaderType", "ModsSearchSortField", "ModStatus", "SortOrder",
    "GameAssets", "Game", "GameVersionsByType", "GameVersionType", "Category",
    "FileHash", "FileDependency", "FileModule", "SortableGameVersion", "FileIndex", "File",
    "ModLinks", "ModAuthor", "ModAsset", "Mod", "FeaturedModsResponse",
    "FolderFingerprint", "FingerprintMatch", "FingerprintsMatchesResult",
    "FingerprintFuzzyMatch", "FingerprintFuzzyMatchResult",
    "MinecraftGameVersion", "MinecraftModLoaderIndex",
    "Pagination", "ApiResponse", "ResponseData", "list_of", "as_str", "serialize",
    "GetGamesResponse", "GetGameResponse", "GetVersionsResponse", "GetVersionTypesResponse",
    "GetCategoriesResponse", "SearchModsResponse", "GetModResponse", "GetModsResponse",
    "GetFeaturedModsResponse", "GetModFileResponse", "GetModFilesResponse", "GetFilesResponse",
    "GetFingerprintMatchesResponse", "GetFingerprintFuzzyMatchesResponse",
    "GetMinecraftVersionsResponse", "GetMinecraftModLoadersResponse", "StringResponse",
]
