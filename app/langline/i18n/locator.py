"""Discovery of translation files for a logical source name."""

from pathlib import Path
from typing import Iterable, List, Sequence

from langline.logging import get_module_logger

logger = get_module_logger()

DEFAULT_EXTENSIONS = (".yml", ".yaml", ".json")


class SourceLocator:
    """Finds every file backing a (source, locale) pair.

    Files are expected at::

        <search path>/<resource dir>/<locale>/<source><extension>

    Results follow search-path order, then extension order. That order is the
    merge precedence: files found later override files found earlier.

    Attributes:
        search_paths: Base directories, in precedence order (lowest first).
        resource_dir: Directory under each search path holding locale folders.
        extensions: Accepted file extensions, in order.
    """

    def __init__(
        self,
        search_paths: Iterable[Path | str],
        resource_dir: str = "translations",
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ):
        self.search_paths = [Path(path) for path in search_paths]
        self.resource_dir = resource_dir
        self.extensions = tuple(extensions)

        missing = [str(path) for path in self.search_paths if not path.is_dir()]
        if missing:
            logger.warning("missing_search_paths", search_paths=missing)

    def candidates(self, source: str, locale: str) -> List[Path]:
        """All paths that would back the source, existing or not."""
        paths = []
        for base in self.search_paths:
            locale_dir = base / self.resource_dir / locale
            for extension in self.extensions:
                paths.append(locale_dir / f"{source}{extension}")
        return paths

    def locate(self, source: str, locale: str) -> List[Path]:
        """Existing files for the source, in precedence order.

        Returns:
            Possibly empty list of file paths.
        """
        found = [path for path in self.candidates(source, locale) if path.is_file()]
        logger.debug(
            "located_translation_files",
            source=source,
            locale=locale,
            file_count=len(found),
        )
        return found
