"""Project types, asset locations and dependency sets for scaffolding."""
from enum import Enum
from pathlib import Path

ASSET_DIR = Path(__file__).parent / "files"


class ProjectType(str, Enum):
    """Kind of project skeleton to generate."""

    NODE = "node"
    CLIENT_SERVER = "client-server"


class RepoVisibility(str, Enum):
    """GitHub repository visibility; NONE skips remote creation."""

    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"
    NONE = "none"


# Root assets copied into every project (asset name -> destination)
COMMON_ASSETS = {
    "gitignore": ".gitignore",
    "tsconfig.json": "tsconfig.json",
    "lefthook.yml": ".lefthook.yml",
    "oxlint.json": "oxlint.json",
}

BASE_DEPENDENCIES = [
    "@types/bun",
    "lodash",
    "typescript",
    "@typescript/native-preview",
    "oxlint",
    "lefthook",
    "kill-port-process",
]

CLIENT_SERVER_DEPENDENCIES = [
    "kill-port-process",
    "concurrently",
    "react",
    "react-dom",
    "vite",
    "antd",
    "@ant-design/icons",
    "@vitejs/plugin-react",
    "@tanstack/router-plugin",
    "@emotion/react",
    "@emotion/styled",
    "@phosphor-icons/react",
    "vite-tsconfig-paths",
    "@tailwindcss/vite",
]

BUN_RUN = (
    "bun run --elide-lines 0 --no-clear-screen --install fallback "
    "--env-file .env --env-file .env.local --filter "
)

DEV_COMMAND = (
    "concurrently --restart-tries=-1 --restart-after=1000 "
    "--names 'server ,client ,' --c 'green,cyan' "
    "'bun run server:dev' 'bun run client:dev'"
)


def asset_path(name: str) -> Path:
    """Location of a bundled asset file or directory."""
    return ASSET_DIR / name
