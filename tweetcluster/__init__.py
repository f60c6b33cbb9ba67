# tweetcluster
# Tweet search + bag-of-words greedy similarity clustering
