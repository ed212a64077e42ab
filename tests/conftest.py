import os

import pytest

FOO_JAVA = (
    "package com.old.foo;\n"
    "\n"
    "import com.old.util.Helper;\n"
    "import java.util.List;\n"
    "\n"
    "public class Foo {}\n"
)

APP_JAVA = (
    "package com.old;\n"
    "\n"
    "import com.old.foo.Foo;\n"
    "\n"
    "public class App {}\n"
)

POM_XML = (
    "<project>\n"
    "  <groupId>com</groupId>\n"
    "  <artifactId>old</artifactId>\n"
    "  <name>com.old</name>\n"
    "</project>\n"
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def java_project(tmp_path):
    """A small Maven layout using the com.old package, plus .git/target noise."""
    root = tmp_path / "project"
    src = root / "src" / "main" / "java"
    _write(src / "com" / "old" / "App.java", APP_JAVA)
    _write(src / "com" / "old" / "foo" / "Foo.java", FOO_JAVA)
    _write(root / "pom.xml", POM_XML)
    _write(root / "README.md", "package com.old is documented here\n")
    _write(root / ".git" / "com" / "old" / "Hook.java", "package com.old;\n")
    _write(root / "target" / "classes" / "com" / "old" / "Gen.java", "package com.old;\n")
    _write(root / "target" / "pom.xml", "<groupId>com.old</groupId>\n")
    return root
