"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


# Vector drawables shaped like the Material Symbols exports

ALARM_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="960"
    android:viewportHeight="960"
    android:tint="?attr/colorControlNormal">
  <path
      android:fillColor="@android:color/white"
      android:pathData="M480,880Q405,880 339.5,851.5Q274,823 225.5,774.5L480,520Z"/>
</vector>
'''

ARROW_BACK_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="960"
    android:viewportHeight="960"
    android:autoMirrored="true"
    android:tint="?attr/colorControlNormal">
  <path
      android:fillColor="@android:color/white"
      android:pathData="M313,520L537,744L480,800L160,480L480,160L537,216L313,440L800,440L800,520L313,520Z"/>
</vector>
'''

GROUPED_XML = '''<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24"
    android:viewportHeight="24">
  <path
      android:fillAlpha="0.3"
      android:pathData="M2,2h20v20H2z"/>
  <group>
    <clip-path android:pathData="M0,0h24v24H0z"/>
    <path
        android:fillType="evenOdd"
        android:strokeAlpha="0.5"
        android:pathData="M12,2a10,10 0,1 0,0.01 0z"/>
    <path android:pathData="m4,4 l2,2 2,2"/>
  </group>
</vector>
'''

NO_VIEWPORT_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="not-a-number">
  <path android:pathData="M0,0L1,1"/>
</vector>
'''

NOT_A_VECTOR_XML = '''<shape xmlns:android="http://schemas.android.com/apk/res/android">
  <path android:pathData="M0,0L1,1"/>
</shape>
'''

THEME_FOLDERS = ("materialsymbolsoutlined", "materialsymbolsrounded", "materialsymbolssharp")


def write_icon(root: Path, icon_name: str, file_names: dict[str, str], themes=THEME_FOLDERS) -> Path:
    """Create ``root/icon_name/<theme>/<file>`` for every theme and file name."""
    icon_dir = root / icon_name
    for theme in themes:
        theme_dir = icon_dir / theme
        theme_dir.mkdir(parents=True, exist_ok=True)
        for file_name, content in file_names.items():
            (theme_dir / file_name).write_text(content, encoding="utf-8")
    return icon_dir


@pytest.fixture
def icon_tree(tmp_path: Path) -> Path:
    """One plain icon and one auto-mirrored icon, each in every theme."""
    root = tmp_path / "raw-icons"
    write_icon(root, "alarm", {"alarm_24px.xml": ALARM_XML})
    write_icon(root, "arrow_back", {"arrow_back_24px.xml": ARROW_BACK_XML})
    return root


@pytest.fixture
def single_icon_tree(tmp_path: Path) -> Path:
    root = tmp_path / "raw-icons"
    write_icon(root, "alarm", {"alarm_24px.xml": ALARM_XML})
    return root
