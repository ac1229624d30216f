"""Commit types offered to the model, with descriptions and examples."""

from dataclasses import dataclass


MIN_DESCRIPTION_CHARS = 10
MAX_DESCRIPTION_CHARS = 72


@dataclass(frozen=True)
class CommitType:
    """A conventional commit type and how it should be used.

    Attributes:
        name: The type keyword (feat, fix, ...).
        description: When the type applies.
        example: A sample commit message using the type.
        priority: Higher priorities are listed first.
    """

    name: str
    description: str
    example: str
    priority: int


COMMIT_TYPES = (
    CommitType(
        "feat",
        "A new feature or significant functionality addition (e.g., adding new endpoints, UI components, initial project setup).",
        "feat: Implement user authentication via OAuth",
        9,
    ),
    CommitType(
        "fix",
        "A bug fix (e.g., correcting calculation errors, addressing crashes, security vulnerabilities).",
        "fix: Correct off-by-one error in pagination",
        8,
    ),
    CommitType(
        "perf",
        "A code change that improves performance without adding features or fixing bugs.",
        "perf: Optimize image loading by using WebP format",
        7,
    ),
    CommitType(
        "refactor",
        "A code change that neither fixes a bug nor adds a feature (e.g., renaming variables, improving code structure, reorganizing files).",
        "refactor: Extract user service from main controller",
        6,
    ),
    CommitType(
        "build",
        "Changes that affect the build system or external dependencies (e.g., Webpack, NPM, package.json updates).",
        "build: Configure webpack for tree shaking optimization",
        5,
    ),
    CommitType(
        "ci",
        "Changes to CI configuration files and scripts (e.g., GitHub Actions, Travis, deployment pipelines).",
        "ci: Add automated deployment step to GitHub Actions",
        5,
    ),
    CommitType(
        "test",
        "Adding missing tests or correcting existing tests without changing application logic.",
        "test: Add unit tests for new payment_processor module",
        4,
    ),
    CommitType(
        "docs",
        "Documentation only changes that don't affect code functionality (e.g., updating README, API docs, comments).",
        "docs: Update README with setup instructions",
        3,
    ),
    CommitType(
        "style",
        "Changes that do not affect the meaning of the code (white-space, formatting, missing semi-colons, etc).",
        "style: Format code according to project guidelines",
        2,
    ),
    CommitType(
        "chore",
        "Maintenance tasks, dependency updates, or tooling changes that don't modify application code.",
        "chore: Update ESLint to version 8.50.0",
        3,
    ),
    CommitType(
        "revert",
        "Reverts a previous commit.",
        "revert: Revert commit 'abcdef12' due to critical bug",
        8,
    ),
    CommitType(
        "readme",
        "Specifically for standalone changes to the README file only.",
        "readme: Add contribution guidelines and code of conduct",
        2,
    ),
)


TYPE_SELECTION_GUIDANCE = """CRITICAL: Type Selection Hierarchy - When determining the commit type, follow this decision process:
1. If creating new functionality, features, or initial project setup → use 'feat'
2. If fixing bugs, errors, or security issues → use 'fix'
3. If improving performance without adding features → use 'perf'
4. If restructuring code without changing behavior → use 'refactor'
5. If changing build configuration or dependencies → use 'build'
6. If modifying CI/CD pipelines → use 'ci'
7. If only adding/updating tests → use 'test'
8. If only updating documentation → use 'docs'
9. If only formatting/style changes → use 'style'
10. If maintenance tasks or dependency updates → use 'chore'

IMPORTANT: Even if individual files (like README.md, package.json, etc.) are part of a larger change, choose the type that represents the PRIMARY PURPOSE of the entire commit. For example: Initial project setup that includes README.md, package.json, and source files should be 'feat', not 'docs' or 'chore', because the primary purpose is creating new functionality."""


def format_commit_types() -> str:
    """Render the commit type table, highest priority first.

    Types with equal priority are ordered by name.

    Returns:
        One ``- name: description (Example: "...")`` line per type, each
        terminated by a newline.
    """
    ordered = sorted(COMMIT_TYPES, key=lambda ct: (-ct.priority, ct.name))
    return "".join(
        f'- {ct.name}: {ct.description} (Example: "{ct.example}")\n' for ct in ordered
    )
