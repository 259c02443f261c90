from setuptools import setup

setup(name="factoriodat",
      version="0.1",
      description="A simple python library to read and write Factorio mod-settings.dat files and save headers.",
      keywords="factorio propertytree mod-settings save",
      packages=["factoriodat"],
      python_requires=">=3.6",
      install_requires=["numpy"],
      extras_require={
          "test": ["pytest"]
      })
