"""Load source files from disk."""

from pathlib import Path

from loguru import logger

from code_similarity.document import SourceFile
from code_similarity.errors import InvalidCorpusError


def load_sources(directory, pattern="**/*.java", encoding="utf-8"):
    """Read every file under ``directory`` matching ``pattern``.

    Files are returned in sorted path order, identified by their path
    relative to ``directory``. Read and decode errors propagate.
    """
    root = Path(directory)
    paths = sorted(p for p in root.glob(pattern) if p.is_file())
    if not paths:
        raise InvalidCorpusError("no files matching %r under %s" % (pattern, root))
    sources = [
        SourceFile(path.relative_to(root).as_posix(), path.read_text(encoding=encoding))
        for path in paths
    ]
    logger.debug("Loaded {} files from {}", len(sources), root)
    return sources
