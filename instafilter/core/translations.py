"""
Russian display names for engine filter identifiers.

Known identifiers come from a fixed table. Anything else is formatted by
dropping the engine prefix, splitting the CamelCase remainder into words
and translating the words that have a known Russian equivalent.
"""

from typing import List

FILTER_PREFIX = "CI"

FILTER_NAMES = {
    # Популярные фильтры
    "CISepiaTone": "Сепия",
    "CIGaussianBlur": "Размытие по Гауссу",
    "CIPixellate": "Пикселизация",
    "CIVignette": "Виньетка",
    "CIUnsharpMask": "Нерезкая маска",
    "CIEdges": "Края",
    "CICrystallize": "Кристаллизация",

    # Цветовые фильтры
    "CIColorControls": "Цветовые настройки",
    "CIExposureAdjust": "Коррекция экспозиции",
    "CIHueAdjust": "Коррекция оттенка",
    "CISaturationAdjust": "Коррекция насыщенности",
    "CIVibrance": "Яркость",
    "CIColorMonochrome": "Монохром",
    "CIColorPosterize": "Постеризация",
    "CIColorInvert": "Инверсия цвета",
    "CIGammaAdjust": "Коррекция гаммы",

    # Искажения
    "CIBumpDistortion": "Выпуклость",
    "CITwirlDistortion": "Завихрение",
    "CIPinchDistortion": "Сжатие",
    "CIHoleDistortion": "Дыра",
    "CIGlassDistortion": "Стекло",
    "CITorusLensDistortion": "Тороидальная линза",

    # Размытие
    "CIMotionBlur": "Размытие движения",
    "CIZoomBlur": "Размытие зума",
    "CIBokehBlur": "Боке",
    "CIDiscBlur": "Дисковое размытие",

    # Стилизация
    "CIPhotoEffectMono": "Монохром",
    "CIPhotoEffectChrome": "Хром",
    "CIPhotoEffectFade": "Выцветание",
    "CIPhotoEffectInstant": "Инстант",
    "CIPhotoEffectNoir": "Нуар",
    "CIPhotoEffectProcess": "Процесс",
    "CIPhotoEffectTonal": "Тональный",
    "CIPhotoEffectTransfer": "Перенос",

    # Художественные эффекты
    "CIPointillize": "Пуантилизм",
    "CILineOverlay": "Линии",
    "CIGloom": "Свечение",
    "CIBloom": "Цветение",
    "CIKaleidoscope": "Калейдоскоп",
    "CITriangleKaleidoscope": "Треугольный калейдоскоп",

    # Освещение
    "CISpotLight": "Прожектор",
    "CISunbeams": "Солнечные лучи",
    "CILightTunnel": "Световой туннель",
    "CIStarShineGenerator": "Звездный блеск",

    # Генераторы текстур
    "CICheckerboardGenerator": "Шахматная доска",
    "CIStripesGenerator": "Полосы",
    "CIRandomGenerator": "Случайная текстура",
    "CIConstantColorGenerator": "Постоянный цвет",
}

WORD_TRANSLATIONS = {
    "Blur": "Размытие",
    "Distortion": "Искажение",
    "Effect": "Эффект",
    "Filter": "Фильтр",
    "Generator": "Генератор",
    "Adjust": "Коррекция",
    "Color": "Цвет",
    "Light": "Свет",
    "Photo": "Фото",
    "Gaussian": "Гауссово",
    "Motion": "Движение",
    "Zoom": "Зум",
    "Disc": "Диск",
    "Bokeh": "Боке",
    "Box": "Прямоугольное",
    "Median": "Медианный",
    "Sharpen": "Резкость",
    "Luminance": "Яркости",
    "Noise": "Шум",
    "Reduction": "Подавление",
    "Comic": "Комикс",
}


def split_camel_case(text: str) -> List[str]:
    """Split on uppercase boundaries ("FooBarBlur" -> ["Foo", "Bar", "Blur"])."""
    words = []
    current = ""
    for char in text:
        if char.isupper() and current:
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return words


def format_filter_name(identifier: str) -> str:
    """Fallback display name for identifiers missing from FILTER_NAMES."""
    name = identifier[len(FILTER_PREFIX):] if identifier.startswith(FILTER_PREFIX) else identifier
    words = [WORD_TRANSLATIONS.get(word, word) for word in split_camel_case(name)]
    return " ".join(words)


def translate(identifier: str) -> str:
    """Get the Russian display name for a filter identifier."""
    mapped = FILTER_NAMES.get(identifier)
    if mapped is not None:
        return mapped
    return format_filter_name(identifier)
