from importlib import resources


class TransliterationDataSource:
    package = 'textkit.data'
    filename = 'transliteration.yaml'

    @classmethod
    def yaml_path(cls):
        """ Packaged transliteration table """
        return resources.files(cls.package).joinpath(cls.filename)
