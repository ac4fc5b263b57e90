"""
PHP Project Plan Prompt

Compiles a ProjectSpec into the prompt sent to Gemini plus the generation
config. Pure and deterministic: the same spec always yields the same text
and config.

Rendering rules:
- Bulleted lists render as ``- item`` lines
- Empty core features / frontend stack / design patterns / composer
  packages render as "Not specified"
- Key commands always render as ``- `cmd` `` lines; an empty list leaves
  the block empty (no fallback text)
- Web servers, PSR standards and Monolog channels are comma-joined
- Booleans render as "Yes" / "No"
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from php_blueprint.models.spec import ProjectSpec

NOT_SPECIFIED = "Not specified"
THINKING_BUDGET = 8192

# Indent for bullet lists nested under a top-level "- **Label:**" bullet
NESTED_INDENT = "\n  "


PLAN_PROMPT_TEMPLATE = """Act as a world-class senior PHP architect and tech lead. Your task is to generate a comprehensive, professional, and actionable project plan for a modern PHP application based on the detailed specifications below. The output must be in well-formatted Markdown, with PHP code blocks correctly formatted and Mermaid.js syntax for diagrams.

# Project Specification

- **Project Name:** {project_name}
- **Project Type:** {project_type}
- **Main Goal:** {goal}

## Core Features
{core_features}

## Technology Stack
- **PHP Version:** {php_version}
- **Framework:** {framework}
- **Web Server(s):** {web_servers}
- **Database:** {database}
- **Frontend Stack:** {frontend_stack}

## Architecture & Standards
- **Authentication Method:** {auth_method}
- **Database Layer / ORM:** {database_layer}
- **Caching Layer:** {caching_layer}
- **Queue System:** {queue_system}
- **Key Architectural Choices:**
  - Use Database Migrations: {use_migrations}
  - API-First Approach: {is_api_first}
  - Use API Rate Limiting: {use_api_rate_limiting}
- **Adhered PSR Standards:** {psr_standards}
- **Intended Design Patterns:**
  {design_patterns}

## Dependencies & Tooling
- **Key Composer Packages:**
  {composer_packages}
- **Monolog Logging Channels:** {monolog_channels}
- **Key Commands:**
  {key_commands}

# Your Task: Generate a Detailed Project Plan

Based on the specification above, create a complete plan with the following sections:

1.  **Project Overview:** A professional summary of the project's purpose, scope, and key technologies.
2.  **System Architecture Diagram (Mermaid.js):** Create a Mermaid.js diagram (using a `graph TD` or `C4Context` block) illustrating the high-level architecture. It should show user interaction, the web server, the PHP application (framework), database, caching layer, and queue system.
3.  **Architectural Approach:** Justify the chosen architecture. Explain how the framework, database, cache, and queue system work together to meet the project's goals. Discuss the benefits of the API-first approach if selected.
4.  **Recommended Folder Structure (PSR-4 Compliant):** Provide a clear, tree-like folder structure appropriate for the chosen framework. Explain the purpose of key directories (`app/Http/Controllers`, `app/Services`, `app/Data`, `config`, etc.).
5.  **`composer.json` File:** Generate a complete, ready-to-use `composer.json` file. It must include the specified project name, description, chosen PHP version, all listed Composer packages, and a correctly configured PSR-4 autoload section for the `App\\` namespace.
6.  **Design Pattern Implementation (PHP Examples):** Explain how 2-3 of the most critical specified design patterns should be implemented. Provide brief, framework-aware PHP code examples. For instance, if using Laravel and the Repository Pattern, show a `ProductRepositoryInterface` and a `EloquentProductRepository` implementation. If DTOs are selected, show a simple `ProductDto`.
7.  **Core Feature Implementation Snippets (PHP):** Provide high-quality, framework-aware starter code for one of the core features. For example, a route definition (`routes/api.php`), a controller method, a service class, and a form request for validation.
8.  **Database & Tooling Setup:**
    *   **Migration Example:** If migrations are enabled, provide a "create_products_table" migration using the framework's syntax.
    *   **Cache & Queue Config:** Provide guidance and example snippets for configuring the selected caching layer and queue system in the chosen framework (e.g., `.env` variables for Redis, supervisor config for queues).
    *   **Logging Setup:** Show how to configure Monolog for the specified channels (e.g., a custom channel in Laravel's `config/logging.php`).
9.  **Server Configuration:** Provide essential configuration snippets for the selected web servers (e.g., Apache `.htaccess` rewrite rules for the public directory, an Nginx server block with the correct `try_files` directive for a front controller).
10. **Development Roadmap / First Steps:** Outline a logical, step-by-step plan for developers to start the project, from environment setup to implementing the first feature.

Ensure the entire response is a single, clean Markdown document ready for a developer to use.
"""


@dataclass(frozen=True)
class CompiledPrompt:
    """Prompt text plus the generation config that goes with it."""
    prompt_text: str
    model_config: Dict[str, Any]


# =============================================================================
# RENDERING HELPERS
# =============================================================================

def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _bullets(items: Iterable[str], joiner: str = "\n") -> str:
    return joiner.join(f"- {item}" for item in items)


def _bullets_or_fallback(items: list, joiner: str = "\n") -> str:
    if not items:
        return NOT_SPECIFIED
    return _bullets(items, joiner)


def _commands(items: Iterable[str]) -> str:
    # No "Not specified" fallback here: an empty list yields an empty block
    return NESTED_INDENT.join(f"- `{command}`" for command in items)


# =============================================================================
# COMPILER
# =============================================================================

def build_model_config(spec: ProjectSpec) -> Dict[str, Any]:
    """
    Generation config for a spec.

    ``thinkingConfig`` is only present when thinking is enabled; it is never
    set to None/False.
    """
    config: Dict[str, Any] = {
        "temperature": spec.temperature,
        "topP": spec.top_p,
    }
    if spec.enable_thinking:
        config["thinkingConfig"] = {"thinkingBudget": THINKING_BUDGET}
    return config


def build_prompt_text(spec: ProjectSpec) -> str:
    """Interpolate spec values verbatim into the plan prompt template."""
    return PLAN_PROMPT_TEMPLATE.format(
        project_name=spec.project_name,
        project_type=spec.project_type,
        goal=spec.goal,
        core_features=_bullets_or_fallback(spec.core_features),
        php_version=spec.php_version,
        framework=spec.framework,
        web_servers=", ".join(spec.web_server),
        database=spec.database,
        frontend_stack=_bullets_or_fallback(spec.frontend_stack, NESTED_INDENT),
        auth_method=spec.auth_method,
        database_layer=spec.database_layer,
        caching_layer=spec.caching_layer,
        queue_system=spec.queue_system,
        use_migrations=_yes_no(spec.use_migrations),
        is_api_first=_yes_no(spec.is_api_first),
        use_api_rate_limiting=_yes_no(spec.use_api_rate_limiting),
        psr_standards=", ".join(spec.psr_standards),
        design_patterns=_bullets_or_fallback(spec.design_patterns, NESTED_INDENT),
        composer_packages=_bullets_or_fallback(spec.composer_packages, NESTED_INDENT),
        monolog_channels=", ".join(spec.monolog_channels),
        key_commands=_commands(spec.key_commands),
    )


def compile_prompt(spec: ProjectSpec) -> CompiledPrompt:
    """
    Compile a spec snapshot into (prompt text, model config).

    Args:
        spec: Project spec snapshot

    Returns:
        CompiledPrompt with freshly built text and config
    """
    return CompiledPrompt(
        prompt_text=build_prompt_text(spec),
        model_config=build_model_config(spec),
    )
