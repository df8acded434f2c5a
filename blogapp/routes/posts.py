from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from ..core import COMMENTS_CREATED, POST_LIKES, POSTS_CREATED, POSTS_DELETED
from ..deps import get_store
from ..schemas import CommentIn, CommentOut, PostIn, PostOut, PostUpdate
from ..storage import Storage

router = APIRouter()

POST_NOT_FOUND = 'Post not found'


@router.get('', response_model=List[PostOut])
async def list_posts(store: Storage = Depends(get_store)):
    return await store.get_all_posts()


@router.get('/{post_id}', response_model=PostOut)
async def get_post(post_id: int, store: Storage = Depends(get_store)):
    post = await store.get_post_by_id(post_id)
    if not post:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return post


@router.post('', response_model=PostOut, status_code=201)
async def create_post(payload: PostIn, store: Storage = Depends(get_store)):
    post = await store.create_post(payload)
    POSTS_CREATED.inc()
    return post


@router.put('/{post_id}', response_model=PostOut)
async def update_post(post_id: int, payload: PostUpdate, store: Storage = Depends(get_store)):
    post = await store.update_post(post_id, payload)
    if not post:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    return post


@router.delete('/{post_id}', status_code=204)
async def delete_post(post_id: int, store: Storage = Depends(get_store)):
    if not await store.delete_post(post_id):
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    POSTS_DELETED.inc()
    return Response(status_code=204)


@router.post('/{post_id}/like', response_model=PostOut)
async def like(post_id: int, store: Storage = Depends(get_store)):
    post = await store.like_post(post_id)
    if not post:
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    POST_LIKES.inc()
    return post


@router.get('/{post_id}/comments', response_model=List[CommentOut])
async def list_comments(post_id: int, store: Storage = Depends(get_store)):
    return await store.get_comments_by_post_id(post_id)


@router.post('/{post_id}/comments', response_model=CommentOut, status_code=201)
async def comment(post_id: int, payload: CommentIn, store: Storage = Depends(get_store)):
    if not await store.get_post_by_id(post_id):
        raise HTTPException(status_code=404, detail=POST_NOT_FOUND)
    # the path decides which post is commented on
    draft = payload.model_copy(update={'post_id': post_id})
    c = await store.create_comment(draft)
    COMMENTS_CREATED.inc()
    return c
