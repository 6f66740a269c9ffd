"""Maps languages, topics and dependencies to tech-stack badges."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..models import MAX_TECH_STACK, Badge, RepositoryData


def _badge(abbr: str, name: str, description: str, start: str, end: str) -> Badge:
    return Badge(
        abbr=abbr,
        name=name,
        description=description,
        color=f"linear-gradient(135deg, {start} 0%, {end} 100%)",
    )


TECH_BADGES: Dict[str, Badge] = {
    # languages, keyed by GitHub's language names
    "JavaScript": _badge("JS", "JavaScript", "Core language", "#f7df1e", "#c9b200"),
    "TypeScript": _badge("TS", "TypeScript", "Type-safe JavaScript", "#3178c6", "#235a97"),
    "Python": _badge("Py", "Python", "Core language", "#3776ab", "#ffd43b"),
    "Go": _badge("Go", "Golang", "Systems programming", "#00add8", "#007d9c"),
    "Rust": _badge("Rs", "Rust", "Systems programming", "#dea584", "#b7410e"),
    "HTML": _badge("HTML", "HTML5", "Markup language", "#e34c26", "#f06529"),
    "CSS": _badge("CSS", "CSS3", "Styling", "#264de4", "#2965f1"),
    # frameworks and platforms, keyed by topic slug
    "react": _badge("React", "React", "UI library", "#61dafb", "#21a1c4"),
    "nextjs": _badge("Next", "Next.js", "React framework", "#000", "#333"),
    "nodejs": _badge("Node", "Node.js", "Runtime", "#68a063", "#3c873a"),
    "docker": _badge("Docker", "Docker", "Containerization", "#2496ed", "#1976d2"),
    "aws": _badge("AWS", "AWS", "Cloud platform", "#ff9900", "#cc7a00"),
    "tensorflow": _badge("TF", "TensorFlow", "ML framework", "#ff6f00", "#ff9800"),
    "pytorch": _badge("PT", "PyTorch", "ML framework", "#ee4c2c", "#ff6f61"),
    "openai": _badge("GPT", "OpenAI", "AI/LLM", "#412991", "#10a37f"),
    "langchain": _badge("LC", "LangChain", "LLM framework", "#1c3c3c", "#2d5a5a"),
}

NODE_DEPENDENCY_KEYS: Dict[str, str] = {
    "react": "react",
    "next": "nextjs",
    "@tensorflow/tfjs": "tensorflow",
    "openai": "openai",
    "langchain": "langchain",
}

PYTHON_REQUIREMENT_KEYS: Dict[str, str] = {
    "tensorflow": "tensorflow",
    "torch": "pytorch",
    "openai": "openai",
    "langchain": "langchain",
}

TOP_LANGUAGES = 3


class TechStackDetector:
    """Builds an ordered, de-duplicated badge list for a repository."""

    def __init__(
        self,
        badges: Optional[Dict[str, Badge]] = None,
        *,
        limit: int = MAX_TECH_STACK,
    ) -> None:
        self.badges = badges if badges is not None else TECH_BADGES
        self.limit = limit

    def detect(self, repo: RepositoryData) -> List[Badge]:
        stack: List[Badge] = []
        seen: set[str] = set()

        def _add(keys: Iterable[str]) -> None:
            for key in keys:
                if len(stack) >= self.limit:
                    return
                badge = self.badges.get(key)
                if badge is None:
                    continue
                name = badge.name.casefold()
                if name in seen:
                    continue
                seen.add(name)
                stack.append(badge)

        _add(repo.top_languages(TOP_LANGUAGES))
        _add(topic.lower() for topic in repo.topics)
        _add(self._node_keys(repo))
        _add(self._python_keys(repo))
        return stack

    @staticmethod
    def _node_keys(repo: RepositoryData) -> List[str]:
        package_json = repo.package_json or {}
        dependencies = package_json.get("dependencies")
        if not isinstance(dependencies, dict):
            return []
        return [key for dep, key in NODE_DEPENDENCY_KEYS.items() if dep in dependencies]

    @staticmethod
    def _python_keys(repo: RepositoryData) -> List[str]:
        if not repo.requirements:
            return []
        text = repo.requirements.lower()
        return [key for package, key in PYTHON_REQUIREMENT_KEYS.items() if package in text]


__all__ = ["TECH_BADGES", "TechStackDetector"]
