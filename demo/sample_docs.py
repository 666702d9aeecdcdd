SAMPLE_DOCS = {
    "AliceCh1.txt": (
        "Alice was beginning to get very tired of sitting by her sister on the bank. "
        "Alice peeped into the book, but it had no pictures. "
        "A White Rabbit with pink eyes ran close by her. "
        "The Rabbit took a watch out of its waistcoat-pocket, and Alice started to her feet."
    ),
    "AliceCh2.txt": (
        "Down the rabbit-hole went Alice. Down, down, down! "
        "Would the fall never come to an end? "
        "Alice fell past a jar of orange marmalade. "
        "Down she came upon a heap of sticks, and the fall was over."
    ),
    "Hatter.txt": (
        "The Hatter poured tea. Have some tea, the March Hare said. "
        "There was no tea left, only the teapot. Alice said nothing."
    ),
    "Queen.txt": (
        "The Queen shouted, Off with her head! "
        "The Queen was in a furious passion. Alice thought the Queen was mad. "
        "The Queen's croquet ground was full of soldiers."
    ),
    "Rabbit.txt": (
        "The White Rabbit hurried by. Rabbit! Rabbit! called Alice, "
        "but the rabbit was gone. Oh my ears and whiskers, said the Rabbit."
    ),
    "Caterpillar.txt": (
        "A large blue Caterpillar sat on a mushroom, smoking a hookah. "
        "Who are YOU? said the Caterpillar. "
        "Alice replied, I hardly know, sir, just at present. "
        "Alice felt very small, only 3 inches high."
    ),
}

NOISE_WORDS = [
    "a", "an", "and", "are", "at", "but", "by", "had", "have", "her", "i", "in",
    "into", "is", "it", "its", "my", "no", "of", "oh", "on", "only", "out", "she",
    "some", "the", "there", "to", "upon", "very", "was", "who", "with", "would",
]
