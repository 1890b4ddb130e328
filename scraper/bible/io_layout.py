from pathlib import Path


class Layout:
    def __init__(self, out_dir: str):
        self.base = Path(out_dir)
        self.chapters_dir = self.base / "chapters"

    def ensure(self) -> None:
        self.base.mkdir(parents=True, exist_ok=True)
        self.chapters_dir.mkdir(parents=True, exist_ok=True)

    def chapter_path(self, translation: str, reference: str) -> Path:
        return self.chapters_dir / f"{translation}-{reference}.json"
