import logging
import re
from dataclasses import dataclass, field, fields
from datetime import date as date_type
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from stats_errors import FileSystemError


logger = logging.getLogger(__name__)

_DISALLOWED = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class PostConfig:
    author: str = "Joseph Powers"
    posts_dir: Path = Path("posts")
    image: str = "post.png"
    categories: Tuple[str, ...] = ("uncategorized",)
    draft: bool = True
    code_fold: bool = True
    packages: Tuple[str, ...] = ("tidyverse", "glue", "scales")
    index_name: str = "index.qmd"

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'PostConfig':
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config.items() if k in known}
        if 'posts_dir' in values:
            values['posts_dir'] = Path(values['posts_dir'])
        for key in ('categories', 'packages'):
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)


def clean_slug(text: str) -> str:
    """Lower-case, drop punctuation, join whitespace runs with underscores.

    clean_slug("Hello, World!  2024") -> "hello_world_2024"
    """
    text = _DISALLOWED.sub('', text.lower())
    return _WHITESPACE.sub('_', text)


def _yaml_bool(value: bool) -> str:
    return 'true' if value else 'false'


def _yaml_quote(value: str) -> str:
    """Escape text for a double-quoted YAML scalar"""
    return value.replace('\\', '\\\\').replace('"', '\\"')


def render_post_template(topic: str, post_date: str, config: PostConfig) -> str:
    """Front matter plus a setup chunk for a new notebook post"""
    categories = ", ".join(config.categories)
    front_matter = [
        "---",
        f'title: "{_yaml_quote(topic)}"',
        f'author: "{_yaml_quote(config.author)}"',
        f'date: "{post_date}"',
        f"image: '{config.image}'",
        f"categories: [{categories}]",
        f"draft: {_yaml_bool(config.draft)}",
        "warning: false",
        "message: false",
        "echo: true",
        "freeze: false",
        f"code-fold: {_yaml_bool(config.code_fold)}",
        "---",
        "",
    ]
    setup_chunk = [
        "```{r}",
        f"pacman::p_load({', '.join(config.packages)})",
        "theme_set(theme_bw())",
        "```",
    ]
    return "\n".join(front_matter + setup_chunk) + "\n"


def create_post(
    topic: str,
    date: Optional[Union[str, date_type]] = None,
    config: Optional[PostConfig] = None
) -> Path:
    """Create {posts_dir}/{date}_{slug}/index.qmd and return the document path"""
    config = config or PostConfig()
    post_date = str(date or date_type.today().isoformat())
    dir_name = f"{post_date}_{clean_slug(topic)}"
    dir_path = Path(config.posts_dir) / dir_name

    try:
        dir_path.mkdir(parents=False)
    except FileExistsError as exc:
        raise FileSystemError(f"Post directory already exists: {dir_path}") from exc
    except OSError as exc:
        raise FileSystemError(f"Could not create post directory {dir_path}: {exc}") from exc

    index_path = dir_path / config.index_name
    try:
        index_path.write_text(render_post_template(topic, post_date, config), encoding='utf-8')
    except OSError as exc:
        raise FileSystemError(f"Could not write {index_path}: {exc}") from exc

    logger.info("Directory %s created with %s file.", dir_name, config.index_name)
    return index_path
