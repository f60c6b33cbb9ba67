# tweet_vectorizer.py

from tweetcluster.models.tweet_model import TweetModel
from tweetcluster.utils.text_normalizer import tokenize

def vectorize(vocabulary: dict[str, float], tweet: TweetModel) -> dict[str, float]:
    """vocabulary 템플릿을 복사해서 트윗에 있는 단어만 1.0으로 세팅한다"""
    vector = dict(vocabulary)
    for word in tokenize(tweet.text):
        # vocabulary에 없는 단어는 좌표가 없으므로 무시
        if word in vector:
            vector[word] = 1.0
    return vector
