from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="axis6-e2e",
    version="1.0.0",
    author="AXIS6",
    description="Browser end-to-end suite and site health probe for the AXIS6 web application",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["axis6_e2e", "axis6_e2e.*"]),
    package_data={"axis6_e2e": ["baselines/*.png"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Framework :: Pytest",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    entry_points={
        "console_scripts": [
            "axis6-site-probe=axis6_e2e.site_probe:main",
        ],
    },
)
