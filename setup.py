# setup.py
from setuptools import setup

setup(
    name="CubeOfCubes",
    version="0.1.0",
    description="Shell-growable voxel cube that keeps only its visible faces rendered",
    packages=["world", "render", "engine"],
    python_requires=">=3.8",
    install_requires=["panda3d"],
    extras_require={"test": ["pytest"]},
    options = {
        "build_apps": {
            "gui_apps":     {"CubeViewer": "tools/view_cube.py"},
            "include_patterns": ["config/**"],
            "exclude_patterns": ["**/__pycache__/**","**/*.pyc"],
            "plugins": ["pandagl"],
            "platforms": ["manylinux2014_x86_64","win_amd64","macosx_11_0_arm64"],
            "log_filename": None,
        }
    }
)
