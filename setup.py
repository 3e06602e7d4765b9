#!/usr/bin/env python3

import setuptools

setuptools.setup(
    name="box-stop",
    version="1.0.0",
    description="Stop podman/docker containers with confirmation",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords=["python", "podman", "docker", "containers"],
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    zip_safe=False,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    entry_points={"console_scripts": [
        "box-stop=box_stop.cli:main",
    ]},
)
