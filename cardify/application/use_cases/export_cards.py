"""
Name: Export Cards Use Case

Responsibilities:
  - Orchestrate a card export: read → reconcile → write back → segment → create artifacts
  - Add missing anchors to the source document (written back in place)
  - Create one embed file per non-empty block, skipping existing paths
  - Report how many artifact files were created

Collaborators:
  - domain/services.DocumentStore: document and artifact I/O
  - domain/services.Notifier: single-line user notices
  - infrastructure/text: splitter, segmenter, reconciler, artifact builder

Constraints:
  - Only markdown documents (".md") are exported
  - No writes at all when the body holds no non-empty block
  - Expected failures never raise: they end the run in FAILED with an error
  - Existing artifacts are never overwritten

Notes:
  - Artifacts of one run are created from a thread pool; every task is
    awaited before the final count is reported
  - Each task runs in a copy of the caller context so worker log lines
    keep the run_id and document_path
  - A store with exclusive create may raise FileExistsError on a race;
    that is handled exactly like an existing path (skip + notice)
"""

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import List, Optional, Tuple
from uuid import uuid4

from ...context import document_path_var, run_id_var
from ...domain.services import DocumentStore, Notifier
from ...domain.value_objects import SeparatorConfig
from ...exceptions import (
    CardifyError,
    CollaboratorIOError,
    SegmentationConsistencyError,
    UserInputError,
)
from ...infrastructure.text import (
    artifact_folder,
    artifact_path,
    build_linked_block,
    non_empty_blocks,
    reconcile,
    segment,
    split_document,
)
from .results import ExportError, ExportErrorCode

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"
NO_CONTENT_MESSAGE = "No new content"


class ExportState(str, Enum):
    """R: States of one export invocation."""

    IDLE = "IDLE"
    READING = "READING"
    RECONCILING = "RECONCILING"
    WRITING_BACK = "WRITING_BACK"
    SEGMENTING = "SEGMENTING"
    NO_CONTENT = "NO_CONTENT"
    CREATING_ARTIFACTS = "CREATING_ARTIFACTS"
    DONE = "DONE"
    FAILED = "FAILED"


class ArtifactOutcome(str, Enum):
    CREATED = "CREATED"
    SKIPPED = "SKIPPED"


@dataclass
class ExportCardsInput:
    document_path: Optional[str]
    separator: SeparatorConfig = field(default_factory=SeparatorConfig.default)


@dataclass
class ExportCardsOutput:
    state: ExportState
    trace: List[ExportState] = field(default_factory=list)
    created: int = 0
    skipped: int = 0
    folder: Optional[str] = None
    created_paths: List[str] = field(default_factory=list)
    skipped_paths: List[str] = field(default_factory=list)
    error: Optional[ExportError] = None

    @property
    def no_content(self) -> bool:
        return ExportState.NO_CONTENT in self.trace

    @property
    def failed_at(self) -> Optional[ExportState]:
        """R: Last state entered before the run failed."""
        if self.state != ExportState.FAILED or len(self.trace) < 2:
            return None
        return self.trace[-2]


class ExportCardsUseCase:
    """
    R: Use case for splitting one document into linked card files.
    """

    def __init__(
        self,
        store: DocumentStore,
        notifier: Notifier,
        *,
        anchor_length: int = 10,
        unique_anchors: bool = False,
        artifact_extension: str = ".md",
        max_parallel_writes: int = 8,
        anchor_generator=None,
    ):
        if max_parallel_writes <= 0:
            raise ValueError(f"max_parallel_writes must be > 0, got {max_parallel_writes}")

        self.store = store
        self.notifier = notifier
        self.anchor_length = anchor_length
        self.unique_anchors = unique_anchors
        self.artifact_extension = artifact_extension
        self.max_parallel_writes = max_parallel_writes
        self.anchor_generator = anchor_generator

    def execute(self, input_data: ExportCardsInput) -> ExportCardsOutput:
        output = ExportCardsOutput(state=ExportState.IDLE, trace=[ExportState.IDLE])
        run_token = run_id_var.set(str(uuid4()))
        path_token = document_path_var.set(input_data.document_path or "")

        try:
            self._run(input_data, output)
        except UserInputError as exc:
            self._fail(output, exc, self._user_error_code(output))
        except CollaboratorIOError as exc:
            self._fail(output, exc)
        except SegmentationConsistencyError as exc:
            logger.exception("Export aborted: segmentation invariant violated")
            self._fail(output, exc)
        finally:
            run_id_var.reset(run_token)
            document_path_var.reset(path_token)

        return output

    # =========================================================
    # Pipeline
    # =========================================================
    def _run(self, input_data: ExportCardsInput, output: ExportCardsOutput) -> None:
        path = self._validate_path(input_data.document_path)
        pattern = input_data.separator.pattern

        self._enter(output, ExportState.READING)
        if not self.store.file_exists(path):
            raise UserInputError(f"Cannot get active document: {path}")
        raw_text = self.store.read_document(path)

        self._enter(output, ExportState.RECONCILING)
        document = split_document(raw_text)
        segmented = segment(document.body, pattern)
        if not non_empty_blocks(segmented):
            self._finish_without_content(output)
            return

        reconciled_body = reconcile(
            segmented.blocks,
            segmented.separators,
            anchor_length=self.anchor_length,
            unique=self.unique_anchors,
            generate=self.anchor_generator,
        )

        self._enter(output, ExportState.WRITING_BACK)
        self.store.write_document(path, document.header + reconciled_body)

        self._enter(output, ExportState.SEGMENTING)
        document_path = PurePosixPath(path)
        base_name = document_path.stem
        blocks = non_empty_blocks(segment(reconciled_body, pattern))
        linked_blocks = [build_linked_block(block, base_name) for block in blocks]
        if not linked_blocks:
            self._finish_without_content(output)
            return

        self._enter(output, ExportState.CREATING_ARTIFACTS)
        parent = str(document_path.parent)
        folder = artifact_folder("" if parent == "." else parent, base_name)
        output.folder = folder
        if not self.store.file_exists(folder):
            self.store.create_folder(folder)

        jobs = [
            (artifact_path(folder, idx, lb.title, self.artifact_extension), lb.link)
            for idx, lb in enumerate(linked_blocks)
        ]
        self._create_artifacts(jobs, output)

        self._enter(output, ExportState.DONE)
        if output.created > 0:
            self.notifier.notify(f"{output.created} new files stored in {folder}")
        else:
            self.notifier.notify(f"No new files stored in {folder}")
        logger.info(
            "Export finished",
            extra={
                "artifacts_created": output.created,
                "artifacts_skipped": output.skipped,
                "folder": folder,
            },
        )

    def _create_artifacts(
        self, jobs: List[Tuple[str, str]], output: ExportCardsOutput
    ) -> None:
        """R: Create all artifacts concurrently, then fold the outcomes."""
        first_error: Optional[CollaboratorIOError] = None

        with ThreadPoolExecutor(
            max_workers=min(self.max_parallel_writes, len(jobs)),
            thread_name_prefix="cardify-artifact",
        ) as pool:
            futures = [
                (
                    target,
                    pool.submit(
                        contextvars.copy_context().run,
                        self._create_artifact,
                        target,
                        link,
                    ),
                )
                for target, link in jobs
            ]
            for target, future in futures:
                try:
                    outcome = future.result()
                except CollaboratorIOError as exc:
                    first_error = first_error or exc
                    continue
                if outcome is ArtifactOutcome.CREATED:
                    output.created += 1
                    output.created_paths.append(target)
                else:
                    output.skipped += 1
                    output.skipped_paths.append(target)

        if first_error is not None:
            raise first_error

    def _create_artifact(self, target: str, link: str) -> ArtifactOutcome:
        if self.store.file_exists(target):
            return self._skip(target)
        try:
            self.store.create_file(target, link)
        except FileExistsError:
            return self._skip(target)
        return ArtifactOutcome.CREATED

    def _skip(self, target: str) -> ArtifactOutcome:
        self.notifier.notify(f"{target} already exists, skipped overwriting it.")
        logger.info("Artifact skipped (exists)", extra={"path": target})
        return ArtifactOutcome.SKIPPED

    # =========================================================
    # Helpers
    # =========================================================
    @staticmethod
    def _validate_path(document_path: Optional[str]) -> str:
        if not document_path or not document_path.strip():
            raise UserInputError("Cannot get active document.")
        if PurePosixPath(document_path).suffix != MARKDOWN_EXTENSION:
            raise UserInputError("Active document is not a markdown file.")
        return document_path

    @staticmethod
    def _enter(output: ExportCardsOutput, state: ExportState) -> None:
        output.state = state
        output.trace.append(state)

    def _finish_without_content(self, output: ExportCardsOutput) -> None:
        if output.state != ExportState.SEGMENTING:
            self._enter(output, ExportState.SEGMENTING)
        self._enter(output, ExportState.NO_CONTENT)
        self.notifier.notify(NO_CONTENT_MESSAGE)
        self._enter(output, ExportState.DONE)
        logger.info("Export finished without content")

    @staticmethod
    def _user_error_code(output: ExportCardsOutput) -> ExportErrorCode:
        if output.state == ExportState.READING:
            return ExportErrorCode.NOT_FOUND
        return ExportErrorCode.VALIDATION_ERROR

    def _fail(
        self,
        output: ExportCardsOutput,
        exc: CardifyError,
        code: Optional[ExportErrorCode] = None,
    ) -> None:
        failed_at = output.state
        output.error = ExportError.from_exception(exc, code)
        self._enter(output, ExportState.FAILED)
        self.notifier.notify(exc.message)
        logger.warning(
            "Export failed",
            extra={
                "failed_at": failed_at.value,
                "error_code": exc.error_code,
                "error_id": exc.error_id,
                "resource": getattr(exc, "resource", None),
            },
        )
