# /app/services/packaging_service.py

"""
Builds the downloadable static-site archive. Empty stylesheets and scripts are
left out of the archive entirely, and the README only lists the files that
were actually included.
"""

import io
import zipfile
from typing import List, Optional

FILE_DESCRIPTIONS = {
    "index.html": "Main page",
    "styles.css": "CSS styles",
    "script.js": "JavaScript",
}


def _has_content(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def build_readme(included_files: List[str]) -> str:
    file_lines = "\n".join(f"- {name} - {FILE_DESCRIPTIONS.get(name, name)}" for name in included_files)
    return f"""# Your Professional Website

Generated with AI Web Builder

## Included files:
{file_lines}

## How to use:
1. Upload these files to your hosting (FTP, cPanel, etc)
2. Make sure index.html is at the root of your site
3. Your website is live!

## Customization:
You can edit the files directly or use the builder to regenerate them.
"""


def build_site_archive(html: str, css: Optional[str] = None, js: Optional[str] = None) -> bytes:
    """Returns the bytes of a ZIP archive with the site files and a README."""
    files = {"index.html": html}
    if _has_content(css):
        files["styles.css"] = css
    if _has_content(js):
        files["script.js"] = js

    memory_file = io.BytesIO()
    with zipfile.ZipFile(memory_file, "w", zipfile.ZIP_DEFLATED) as zf:
        for filename, content in files.items():
            zf.writestr(filename, content.encode("utf-8"))
        zf.writestr("README.md", build_readme(list(files)).encode("utf-8"))

    return memory_file.getvalue()
