from setuptools import setup, find_packages


def _requirements(path):
    requirements = []
    with open(path, "r") as fp:
        for line in fp:
            line = line.split("#", 1)[0].strip()
            if line:
                requirements.append(line)
    return requirements


setup(
    name="logsink",
    version="1.0.0",
    packages=find_packages(exclude=["tests*"]),
    entry_points={"console_scripts": ["logsink = logsink.cli:cli"]},
    install_requires=_requirements("requirements/main.in"),
    extras_require={"tests": _requirements("requirements/tests.in")},
    python_requires=">=3.7",
)
