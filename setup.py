from setuptools import setup, find_namespace_packages

__version__ = "1.0.0"

requirements = [
    "pydantic>=2.0,<3.0",
    "jinja2",
    "xmlsec",
    "lxml",
    "pyOpenSSL",
]

setup(
    name="samlsp",
    version=__version__,
    packages=find_namespace_packages(include=["samlsp", "samlsp.*"]),
    package_dir={"samlsp": "samlsp"},
    package_data={"samlsp": ["templates/saml/xml/*.jinja"]},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "cryptography",
            "freezegun",
            "pytest",
            "pytest-mock",
        ]
    },
)
