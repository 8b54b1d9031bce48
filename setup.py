from setuptools import setup, find_packages

setup(
    name="uttt-minimax-bot",
    version="0.1.0",
    description="Ultimate Tic-Tac-Toe game-server bot: minimax with alpha-beta pruning",
    python_requires=">=3.8",
    packages=find_packages(include=["game", "game.*", "ai", "ai.*", "protocol", "protocol.*",
                                    "evaluation", "evaluation.*", "utils", "utils.*"]),
    py_modules=["config", "run_bot", "evaluate"],
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "uttt-bot=run_bot:main",
            "uttt-evaluate=evaluate:main",
        ],
    },
)
