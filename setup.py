from setuptools import setup, find_packages
import os

# Set umask to get standard permissions (rwxr-xr-x for dirs, rw-r--r-- for files)
os.umask(0o022)

setup(
    name="hypr-raise",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",  # For CLI interface and diagnostics
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "raise=hypr_raise.cli:main",
        ],
    },
    description="Run-or-raise window activation for the Hyprland compositor",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
