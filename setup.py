from setuptools import setup, find_packages

setup(
    name="mdpreview",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"mdpreview": ["templates/*.html"]},
    author="Jonathan Heathcote",
    author_email="mail@jhnet.co.uk",
    description="A lightweight markdown to standalone HTML preview compiler.",
    install_requires=["jinja2"],
    extras_require={"test": ["pytest", "mypy"]},
)
