from setuptools import find_packages, setup

setup(
    name="planexplain",
    version="0.1.0",
    description="Renders relational query plans as indented text with attributes, row counts and costs.",
    packages=find_packages(include=["planexplain", "planexplain.*"]),
    python_requires=">=3.10",
    install_requires=["loguru"],
    extras_require={"test": ["pytest"]},
)
