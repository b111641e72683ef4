from setuptools import find_namespace_packages, setup

setup(
    name='feature-resolver',
    version='0.1.0',
    description='Resolve a map click into the single most relevant OpenStreetMap feature',
    python_requires='>=3.11',
    packages=find_namespace_packages(include=['feature_resolver*']),
    install_requires=[
        'cython',
        'githead',
        'httpx',
        'msgspec',
        'numpy',
        'pydantic',
        'pydantic-settings',
        'sentry-sdk',
        'shapely',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'respx',
        ],
    },
)
