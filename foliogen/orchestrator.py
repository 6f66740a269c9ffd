"""Pipeline orchestration for the add-project flow."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional

from .analyzers import ReadmeAnalyzer, TechStackDetector
from .collector import CollectedAnswers, InteractiveCollector
from .config import FoliogenConfig, load_config
from .gallery import GalleryUpdater
from .git.publisher import Publisher
from .github import GitHubClient, RepositoryFetcher, parse_repo_url
from .logging import get_logger
from .models import Badge, ProjectRecord, RepositoryData
from .records import build_record, format_title
from .rendering import TemplateRenderer, generate_filename


@dataclass
class AddOptions:
    """Operator overrides accepted by the ``add`` command."""

    number: Optional[str] = None
    tagline: Optional[str] = None
    demo_url: Optional[str] = None
    social_url: Optional[str] = None
    image_url: Optional[str] = None
    push: bool = True
    dry_run: bool = False


@dataclass
class AddOutcome:
    """Result of one add-project run."""

    record: ProjectRecord
    repository: RepositoryData
    filename: str
    project_path: Path
    gallery_path: Path
    page_html: str
    card_html: str
    dry_run: bool
    branch: Optional[str] = None


class Orchestrator:
    """Runs URL parsing, fetching, analysis, rendering, splicing and publishing in order."""

    def __init__(
        self,
        root: Path | str = ".",
        *,
        config: FoliogenConfig | None = None,
        fetcher: RepositoryFetcher | None = None,
        readme_analyzer: ReadmeAnalyzer | None = None,
        detector: TechStackDetector | None = None,
        collector: InteractiveCollector | None = None,
        renderer: TemplateRenderer | None = None,
        gallery: GalleryUpdater | None = None,
        publisher: Publisher | None = None,
        today: date | None = None,
    ) -> None:
        self.config = config or load_config(Path(root).expanduser().resolve())
        self._fetcher = fetcher
        self.readme_analyzer = readme_analyzer or ReadmeAnalyzer()
        self.detector = detector or TechStackDetector()
        self.collector = collector or InteractiveCollector()
        self.renderer = renderer or TemplateRenderer(
            self.config.templates_dir,
            projects_dir=self.config.projects_dir,
            gallery_page=self.config.gallery_page,
        )
        self.gallery = gallery or GalleryUpdater(
            section_marker=self.config.gallery.section_marker,
            insert_marker=self.config.gallery.insert_marker,
        )
        self.publisher = publisher or Publisher(
            remote=self.config.publish.remote,
            branches=self.config.publish.branches,
        )
        self.today = today
        self.logger = get_logger("orchestrator")

    @property
    def fetcher(self) -> RepositoryFetcher:
        # Built lazily so an invalid URL never touches the environment or network.
        if self._fetcher is None:
            self._fetcher = RepositoryFetcher(
                GitHubClient(
                    base_url=self.config.github.api_url,
                    request_timeout=self.config.github.request_timeout,
                )
            )
        return self._fetcher

    def run_add(self, url: str, options: AddOptions | None = None) -> AddOutcome:
        """Add a project page and gallery card for the repository at ``url``."""
        options = options or AddOptions()
        ref = parse_repo_url(url)
        self.logger.info("Repository: %s", ref.full_name)

        repository = self.fetcher.fetch(ref)
        self.logger.info("Name: %s", repository.name)
        self.logger.info("Description: %s", repository.description or "No description")
        self.logger.info("Languages: %s", ", ".join(repository.languages) or "none")

        readme = self.readme_analyzer.analyze(repository.readme)
        self.logger.info(
            "README: %d features, %d installation steps",
            len(readme.features),
            len(readme.installation),
        )

        tech_stack = self.detector.detect(repository)
        self.logger.info("Detected stack: %s", _names(tech_stack) or "none")

        project_number = options.number or self._next_project_label()
        self.logger.info("Project number: %s", project_number)

        answers = self.collector.collect(
            CollectedAnswers(
                title=format_title(repository.name),
                tagline=options.tagline or repository.description[:100],
                description=readme.description or repository.description,
                demo_url=options.demo_url or "",
                social_url=options.social_url or "",
                image_url=options.image_url or self.config.default_image,
            )
        )

        record = build_record(
            project_number=project_number,
            title=answers.title,
            tagline=answers.tagline,
            description=answers.description,
            github_url=repository.url,
            image_url=answers.image_url,
            demo_url=answers.demo_url,
            social_url=answers.social_url,
            tech_stack=tech_stack,
            features=readme.features,
            installation=readme.installation,
            today=self.today,
        )

        filename = generate_filename(record.title, record.project_number)
        page_html = self.renderer.render_page(record)
        card_html = self.renderer.render_card(record, filename)
        project_path = self.config.projects_path / filename
        gallery_path = self.config.gallery_path

        outcome = AddOutcome(
            record=record,
            repository=repository,
            filename=filename,
            project_path=project_path,
            gallery_path=gallery_path,
            page_html=page_html,
            card_html=card_html,
            dry_run=options.dry_run,
        )

        if options.dry_run:
            self.logger.info("Dry-run completed; no files written")
            return outcome

        # Splice in memory first so a missing anchor aborts before any write.
        spliced = self.gallery.prepare(gallery_path, card_html)

        project_path.parent.mkdir(parents=True, exist_ok=True)
        project_path.write_text(page_html, encoding="utf-8")
        self.logger.info("Created %s", self._relative(project_path))
        self.gallery.write(gallery_path, spliced)
        self.logger.info("Updated %s with %s card", self._relative(gallery_path), record.title)

        if options.push:
            outcome.branch = self.publisher.publish(
                self.config.root,
                project_path,
                gallery_path,
                title=record.title,
            )
        else:
            self.logger.info("Skipping git publish")
        return outcome

    def _next_project_label(self) -> str:
        number = self.gallery.next_project_number(self.config.projects_path)
        return f"Project {number}"

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.config.root).as_posix()
        except ValueError:
            return str(path)


def _names(badges: List[Badge]) -> str:
    return ", ".join(badge.name for badge in badges)


__all__ = ["AddOptions", "AddOutcome", "Orchestrator"]
