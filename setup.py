# setup.py
from setuptools import setup, find_packages

setup(
    name="civra",
    version="0.1.0",
    description="Parses file operations out of LLM responses and selects the project files to send with the next prompt.",
    author="civra developers",
    # civra (parser + CLI) and civracontext (context selection) ship together
    packages=find_packages(include=['civra', 'civra.*', 'civracontext', 'civracontext.*']),
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "pyyaml",
        "jinja2",
        "rich",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'civra = civra.cli:cli',
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Code Generators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
