from setuptools import setup

package_name = 'touch_joystick'

setup(
    name='touch-joystick',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=[package_name, f'{package_name}.widgets'],
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyQt5'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    keywords=['joystick', 'touch', 'virtual joystick', 'qt', 'gamepad'],
    description='Virtual on-screen joysticks (stationary, static, traversal) for touch input.',
    license='BSD',
    entry_points={
        'console_scripts': [
            'touch_joystick = ' + package_name + '.main:main',
        ],
    },
)
