from re import search
from setuptools import setup, find_packages

with open("src/graphql_blueprint/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="graphql-blueprint",
    version=version,
    description="Annotated GraphQL document blueprints and the phases"
    " validating them, built on GraphQL-core.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql validation fragments",
    license="MIT license",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=["graphql-core>=3.1,<4"],
    extras_require={"test": ["pytest>=6", "pytest-describe>=2"]},
    python_requires=">=3.7,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_blueprint": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
