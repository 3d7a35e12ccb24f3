"""WorkEase: project scaffolder for Next.js + Prisma web apps."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("workease")
except PackageNotFoundError:
    __version__ = "0.0.0"
