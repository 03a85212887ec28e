from models.substringindex import SubstringIndex
from logger import info
from config import config


def main() -> list[str]:
    finder = SubstringIndex(config['sampleGrid'])
    words = config['sampleWords']
    result = finder.find(words)
    info(f"Searched {len(set(words))} unique words, found {len(result)}: {', '.join(result)}")

    print("Found words:")
    for word in result:
        print(word)
    return result

if __name__ == "__main__":
    main()
