"""Document assembly: scans a directory of annotated sources into one Swagger document.

Only the first level of the scan directory is read. A file takes part
only if its first comment block carries `@Controller`; that block names
the file's tag group and every later block may describe one operation.
"""

import logging
from pathlib import Path
from typing import Callable

from swagger_doc.config import SwaggerDocConfig
from swagger_doc.definitions import load_definitions
from swagger_doc.errors import ConfigError
from swagger_doc.parser.base import Document, Operation, Route, TagGroup
from swagger_doc.parser.comments import CONTROLLER, extract_blocks, first_annotation, has_tag
from swagger_doc.parser.operation import build_operation

logger = logging.getLogger(__name__)

DuplicateHook = Callable[[Route, Operation, Operation], None]


class DocumentBuilder:
    """Accumulates tag groups and operations, then builds a frozen Document."""

    def __init__(self, config: SwaggerDocConfig, definitions: dict, on_duplicate: DuplicateHook | None = None):
        self.config = config
        self.definitions = definitions
        self.on_duplicate = on_duplicate
        self.tags: list[TagGroup] = []
        self.paths: dict[str, dict[str, Operation]] = {}

    @property
    def security_definitions(self) -> dict | None:
        if not self.config.enable_security:
            return None
        return self.config.security_definitions

    def add_tag(self, tag: TagGroup) -> None:
        self.tags.append(tag)

    def add_operation(self, route: Route, operation: Operation) -> None:
        """Register an operation; a repeated (path, method) replaces the earlier one."""
        methods = self.paths.setdefault(route.path, {})
        method = route.method.lower()
        previous = methods.get(method)
        if previous is not None:
            logger.warning(
                "Duplicate route %s %s: %s replaces %s",
                method, route.path, operation.operation_id, previous.operation_id,
            )
            if self.on_duplicate is not None:
                self.on_duplicate(route, previous, operation)
        methods[method] = operation

    def add_file(self, file_path: Path) -> None:
        """Parse one source file into a tag group and its operations."""
        blocks = extract_blocks(file_path.read_text(encoding="utf-8", errors="replace"))
        if not blocks or not has_tag(blocks[0], CONTROLLER):
            logger.debug("Skipping %s: no @%s block", file_path.name, CONTROLLER)
            return

        controller = first_annotation(blocks[0], CONTROLLER) or []
        tag = TagGroup(
            name=controller[0] if controller else file_path.stem,
            description=" ".join(controller[1:]),
        )
        self.add_tag(tag)

        prefix = file_path.name.split(".")[0]
        for index, block in enumerate(blocks[1:], start=1):
            built = build_operation(
                block,
                tag=tag.name,
                operation_id=f"{prefix}-{index}",
                definitions=self.definitions,
                security_definitions=self.security_definitions,
                consumes=self.config.consumes,
                produces=self.config.produces,
            )
            if built is not None:
                self.add_operation(*built)

    def build(self) -> Document:
        return Document(
            base_path=self.config.base_path,
            info=self.config.api_info,
            schemes=self.config.schemes,
            tags=self.tags,
            paths=self.paths,
            security_definitions=self.security_definitions,
            definitions=self.definitions,
        )


def source_files(directory: Path, suffix: str) -> list[Path]:
    """Regular files directly inside directory whose extension is suffix, sorted by name."""
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == suffix)


def generate_document(
    config: SwaggerDocConfig,
    definitions: dict | None = None,
    on_duplicate: DuplicateHook | None = None,
) -> Document:
    """Build the Swagger document for every annotated file in the scan directory.

    definitions defaults to the contract files in config.contract_dir.
    Any SwaggerDocError aborts the whole run.
    """
    if definitions is None:
        definitions = load_definitions(config.contract_dir)
    if not config.scan_dir.is_dir():
        raise ConfigError(f"scan directory not found: {config.scan_dir}")

    builder = DocumentBuilder(config, definitions, on_duplicate=on_duplicate)
    files = source_files(config.scan_dir, config.suffix)
    logger.info("Scanning %d %s files in %s", len(files), config.suffix, config.scan_dir)
    for file_path in files:
        builder.add_file(file_path)

    return builder.build()
